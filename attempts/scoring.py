"""Exact-match scoring of submitted answers against a quiz's answer key."""


def score_answers(correct_answers, user_answers):
    """Count positions where the submitted answer equals the stored one exactly.

    Extra submitted entries are ignored; missing or ``None`` entries never match.
    """
    score = 0
    for idx, correct in enumerate(correct_answers):
        if idx >= len(user_answers):
            break
        answer = user_answers[idx]
        if answer is not None and answer == correct:
            score += 1
    return score


def score_quiz(quiz, user_answers):
    return score_answers(quiz.answer_key(), user_answers)
