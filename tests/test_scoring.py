from attempts.scoring import score_answers


def test_partial_match():
    assert score_answers(["A", "B", "C"], ["A", "X", "C"]) == 2


def test_empty_submission():
    assert score_answers(["A", "B", "C"], []) == 0


def test_extra_entries_are_ignored():
    assert score_answers(["A", "B", "C"], ["A", "B", "C", "D", "E"]) == 3


def test_exact_case_sensitive_match():
    assert score_answers(["Paris"], ["paris"]) == 0
    assert score_answers(["Paris"], [" Paris"]) == 0


def test_none_never_matches():
    assert score_answers(["A", "B"], [None, "B"]) == 1
