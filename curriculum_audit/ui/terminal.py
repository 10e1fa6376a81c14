"""
Terminal Display Implementation.

This module handles all console/terminal output formatting.
It's the ONLY place where printing happens in the curriculum_audit package.

To create a different UI (web, PDF, etc.), create a new class with
the same method signatures but different output handling.
"""

from ..models import AuditReport, RequirementSetAuditResult


FAILURE_DESCRIPTIONS = {
    "depth": "no 4xxx course in a department with a 2xxx course",
    "pass_no_credit_cap": "too many pass/no-credit credits",
    "credits": "not enough graded credits",
    "requirements": "requirements not yet satisfied",
}


class TerminalDisplay:
    """
    Pretty terminal output for audit reports.

    The audit engines return plain dataclasses; this class only formats
    them. A web or PDF front end would provide the same method names.
    """

    # ANSI color codes for terminal styling
    RESET = "\033[0m"
    BOLD = "\033[1m"
    DIM = "\033[2m"

    GREEN = "\033[92m"
    YELLOW = "\033[93m"
    RED = "\033[91m"
    CYAN = "\033[96m"
    WHITE = "\033[97m"

    BG_GREEN = "\033[42m"
    BG_RED = "\033[41m"

    @classmethod
    def print_header(cls, title: str):
        """Print a major section header with decorative borders."""
        width = 70
        print()
        print(f"{cls.BOLD}{cls.CYAN}{'═' * width}{cls.RESET}")
        print(f"{cls.BOLD}{cls.CYAN}  {title}{cls.RESET}")
        print(f"{cls.BOLD}{cls.CYAN}{'═' * width}{cls.RESET}")

    @classmethod
    def print_subheader(cls, title: str):
        """Print a subsection header."""
        print()
        print(f"{cls.BOLD}{cls.WHITE}  ── {title} ──{cls.RESET}")

    @classmethod
    def status_badge(cls, satisfied: bool) -> str:
        """Return a colored status badge."""
        if satisfied:
            return f"{cls.BG_GREEN}{cls.WHITE} ✓ COMPLETE {cls.RESET}"
        return f"{cls.BG_RED}{cls.WHITE} ✗ MISSING {cls.RESET}"

    @classmethod
    def describe_failure(cls, reason) -> str:
        if reason is None:
            return ""
        if reason.startswith("set_requirement:"):
            return f"set rule '{reason.split(':', 1)[1]}' not met"
        return FAILURE_DESCRIPTIONS.get(reason, reason)

    @classmethod
    def print_student_info(cls, student: dict):
        """Print student identification information."""
        cls.print_header("STUDENT INFORMATION")
        print(f"  {cls.BOLD}Name:{cls.RESET} {student.get('name', 'Unknown')}")
        print(f"  {cls.BOLD}Program:{cls.RESET} {student.get('program', 'Unknown')}")

    @classmethod
    def print_audit_report(cls, report: AuditReport):
        """Print every requirement set of the report, then a summary."""
        cls.print_header(f"CURRICULUM AUDIT: {report.curriculum_name.upper()}")

        print(f"\n  {cls.BOLD}{'SET':<30} {'STATUS':<15} {'CREDITS':<10} {'COURSES'}{cls.RESET}")
        print(f"  {cls.DIM}{'-' * 66}{cls.RESET}")
        for result in report.sets:
            cls._print_set_row(result)

        for result in report.sets:
            cls.print_requirement_set(result)

        if report.unapplied_courses:
            cls.print_subheader("Courses Not Applied")
            for course in report.unapplied_courses:
                print(f"    {cls.YELLOW}{course.code}{cls.RESET} {course.title} ({course.credits:g} cr)")

        cls.print_summary(report)

    @classmethod
    def _print_set_row(cls, result: RequirementSetAuditResult):
        color = cls.GREEN if result.is_fulfilled else cls.RED
        status = "✓ fulfilled" if result.is_fulfilled else "✗ open"
        credits = f"{result.graded_credits:g}/{result.credits_needed:g}"
        print(f"  {color}{result.name:<30}{cls.RESET} {status:<15} {credits:<10} {len(result.applied_courses)}")

    @classmethod
    def print_requirement_set(cls, result: RequirementSetAuditResult):
        """Print one set's requirements and the courses credited to each."""
        cls.print_subheader(result.name)
        if result.description:
            print(f"    {cls.DIM}{result.description}{cls.RESET}")
        print(f"    {cls.status_badge(result.is_fulfilled)}", end="")
        if not result.is_fulfilled:
            print(f" {cls.DIM}{cls.describe_failure(result.failure_reason)}{cls.RESET}", end="")
        print()

        for req in result.requirements:
            if req.exclusion:
                mark = f"{cls.GREEN}✓{cls.RESET}" if req.is_satisfied else f"{cls.RED}✗ excluded course present{cls.RESET}"
            else:
                mark = f"{cls.GREEN}✓{cls.RESET}" if req.is_satisfied else f"{cls.RED}✗{cls.RESET}"
            courses = ", ".join(c.code for c in req.applied_courses) or "-"
            print(f"    {mark} {req.name:<40} {courses}")

        if result.pass_no_credit_credits:
            print(f"    {cls.DIM}Pass/no-credit credits: {result.pass_no_credit_credits:g}{cls.RESET}")

        if result.applied_courses:
            applied = ", ".join(c.code for c in result.applied_courses)
            print(f"    {cls.DIM}Applied: {applied}{cls.RESET}")

    @classmethod
    def print_summary(cls, report: AuditReport):
        cls.print_header("SUMMARY")
        print(f"  {cls.BOLD}Requirement sets fulfilled:{cls.RESET} {report.fulfilled_count}/{len(report.sets)}")
        if report.communication_intensive_needed:
            ci_color = cls.GREEN if report.communication_intensive_satisfied else cls.RED
            print(f"  {cls.BOLD}Communication-intensive courses:{cls.RESET} "
                  f"{ci_color}{report.communication_intensive_count}/{report.communication_intensive_needed}{cls.RESET}")
        print(f"  {cls.BOLD}Overall Status:{cls.RESET} {cls.status_badge(report.overall_satisfied)}")
        print()

    @classmethod
    def print_move_result(cls, course, set_name: str, moved: bool):
        if moved:
            print(f"  {cls.GREEN}✓ Moved {course.code} to {set_name}{cls.RESET}")
        else:
            print(f"  {cls.RED}✗ {set_name} cannot take {course.code}{cls.RESET}")

    @classmethod
    def print_error(cls, message: str):
        print(f"{cls.RED}Error:{cls.RESET} {message}")
