from __future__ import annotations

from curriculum_audit.engines import RequirementAllocator


def _assigned_names(allocation) -> dict:
    return {course.code: req.name for course, req in allocation.assignments.items()}


def test_each_course_goes_to_its_matching_requirement(course, requirement) -> None:
    lower = requirement("CS 2xxx", "CSCI 2xxx")
    upper = requirement("CS 4xxx", "CSCI 4xxx")
    courses = [course("CSCI 2010"), course("CSCI 4500")]

    allocation = RequirementAllocator().allocate([lower, upper], courses)

    assert _assigned_names(allocation) == {"CSCI 2010": "CS 2xxx", "CSCI 4500": "CS 4xxx"}
    assert allocation.is_complete is True


def test_weakest_link_is_served_first(course, requirement) -> None:
    broad = requirement("Any CSCI", "CSCI 4xxx", "CSCI 2xxx")
    narrow = requirement("Upper CSCI", "CSCI 4xxx")
    courses = [course("CSCI 4380"), course("CSCI 2300")]

    allocation = RequirementAllocator().allocate([broad, narrow], courses)

    assert _assigned_names(allocation) == {"CSCI 4380": "Upper CSCI", "CSCI 2300": "Any CSCI"}
    assert allocation.is_complete is True


def test_most_selective_course_is_chosen(course, requirement) -> None:
    first = requirement("First", "CSCI 4380", "CSCI 4430")
    second = requirement("Second", "CSCI 4380", "CSCI 4960")
    courses = [course("CSCI 4380"), course("CSCI 4430"), course("CSCI 4960")]

    allocation = RequirementAllocator().allocate([first, second], courses)

    assert _assigned_names(allocation) == {"CSCI 4430": "First", "CSCI 4380": "Second"}
    assert allocation.requirement_for(courses[2]) is None


def test_no_course_is_used_twice(course, requirement) -> None:
    reqs = [
        requirement("A", "CSCI xxxx", courses_needed=2),
        requirement("B", "CSCI 2xxx", courses_needed=2),
        requirement("C", "CSCI 23xx"),
    ]
    courses = [course("CSCI 2300"), course("CSCI 2310"), course("CSCI 2500"), course("CSCI 4380")]

    allocation = RequirementAllocator().allocate(reqs, courses)

    credited = [c for progress in allocation.progress for c in progress.courses]
    assert len(credited) == len(set(map(id, credited)))
    assert len(credited) == len(allocation.assignments)


def test_allocation_is_deterministic(course, requirement) -> None:
    reqs = [
        requirement("A", "PHIL xxxx", "ECON xxxx"),
        requirement("B", "ECON xxxx"),
        requirement("C", "PHIL 2xxx", "ECON 2xxx", courses_needed=2),
    ]
    courses = [course("PHIL 2110"), course("ECON 2010"), course("ECON 4xxx"), course("PHIL 4xxx")]
    allocator = RequirementAllocator()

    first = _assigned_names(allocator.allocate(reqs, courses))
    second = _assigned_names(allocator.allocate(reqs, courses))

    assert first == second


def test_each_pass_starts_from_fresh_state(course, requirement) -> None:
    req = requirement("Upper", "CSCI 4xxx")
    courses = [course("CSCI 4380")]
    allocator = RequirementAllocator()

    first = allocator.allocate([req], courses)
    second = allocator.allocate([req], courses)

    assert first.progress[0] is not second.progress[0]
    assert len(second.progress[0].courses) == 1


def test_credit_target_stops_taking_courses(course, requirement) -> None:
    req = requirement("8 credits of MATH", "MATH xxxx", courses_needed=0, credits_needed=8)
    courses = [course("MATH 1010"), course("MATH 1020"), course("MATH 2010")]

    allocation = RequirementAllocator().allocate([req], courses)

    progress = allocation.progress_for(req)
    assert progress.credits == 8
    assert progress.is_fulfilled is True
    assert allocation.requirement_for(courses[2]) is None


def test_unsatisfiable_requirement_leaves_allocation_incomplete(course, requirement) -> None:
    req = requirement("Two upper", "CSCI 4xxx", courses_needed=2)

    allocation = RequirementAllocator().allocate([req], [course("CSCI 4380"), course("MATH 4xxx")])

    assert allocation.is_complete is False
    assert len(allocation.progress_for(req).courses) == 1


def test_exclusion_observes_without_consuming(course, requirement) -> None:
    positive = requirement("Any CSCI", "CSCI xxxx")
    excluded = requirement("No intro CSCI", "CSCI 1xxx", exclusion=True)
    intro = course("CSCI 1100")

    allocation = RequirementAllocator().allocate([positive, excluded], [intro])

    assert allocation.requirement_for(intro) is positive
    assert allocation.progress_for(excluded).courses == [intro]
    assert allocation.is_complete is False


def test_already_satisfied_requirement_takes_nothing(course, requirement) -> None:
    free = requirement("Nothing needed", "CSCI xxxx", courses_needed=0)
    allocation = RequirementAllocator().allocate([free], [course("CSCI 2300")])

    assert allocation.assignments == {}
    assert allocation.is_complete is True
