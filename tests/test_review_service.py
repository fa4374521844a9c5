import datetime

import pytest

from wordchain_app.core.error_handlers import NotFoundError, ValidationError
from wordchain_app.core.signals import entry_reviewed
from wordchain_app.modules.review.services import ReviewService
from wordchain_app.modules.vocabulary.services import VocabularyService

ADDED = datetime.date(2024, 1, 1)
DUE = datetime.date(2024, 1, 8)


@pytest.fixture
def vocabulary(memory_repository):
    return VocabularyService(memory_repository)


@pytest.fixture
def review(memory_repository):
    return ReviewService(memory_repository)


@pytest.fixture
def ephemeral(vocabulary, user):
    return vocabulary.add_entry(user, 'ephemeral', 'lasting a very short time', today=ADDED)


class TestStudyQueue:

    def test_nothing_due_before_first_interval(self, review, user, ephemeral):
        assert review.study_queue(user, today=ADDED) == []
        assert review.study_queue(user, today=DUE - datetime.timedelta(days=1)) == []

    def test_due_on_and_after_due_date(self, review, user, ephemeral):
        assert [e.id for e in review.study_queue(user, today=DUE)] == [ephemeral.id]
        assert [e.id for e in review.study_queue(user, today=DUE + datetime.timedelta(days=30))] == [ephemeral.id]

    def test_most_overdue_first(self, review, vocabulary, user):
        vocabulary.add_entry(user, 'zephyr', 'a gentle breeze', today=datetime.date(2023, 12, 1))
        vocabulary.add_entry(user, 'apple', 'a fruit', today=datetime.date(2023, 12, 10))
        vocabulary.add_entry(user, 'aardvark', 'an animal', today=datetime.date(2023, 12, 10))

        words = [e.word for e in review.study_queue(user, today=ADDED)]
        assert words == ['zephyr', 'aardvark', 'apple']


class TestGrade:

    def test_pass_moves_to_consolidating(self, review, vocabulary, user, ephemeral):
        updated = review.grade(user, ephemeral.id, True, today=DUE)

        assert updated.stage == 1
        assert updated.status == 'consolidating'
        assert updated.next_due == datetime.date(2024, 2, 5)
        assert updated.last_tested == DUE
        assert vocabulary.get_entry(user, ephemeral.id) == updated

    def test_fail_keeps_stage(self, review, user, ephemeral):
        updated = review.grade(user, ephemeral.id, False, today=DUE)
        assert updated.stage == 0
        assert updated.next_due == datetime.date(2024, 1, 10)
        assert updated.last_tested == DUE

    def test_graded_entry_leaves_the_queue(self, review, user, ephemeral):
        review.grade(user, ephemeral.id, True, today=DUE)
        assert review.study_queue(user, today=DUE) == []

    def test_text_fields_untouched(self, review, user, ephemeral):
        updated = review.grade(user, ephemeral.id, True, today=DUE)
        assert (updated.word, updated.definition, updated.added_date) == (
            ephemeral.word, ephemeral.definition, ephemeral.added_date
        )

    def test_emits_entry_reviewed(self, review, user, ephemeral):
        received = []

        def listener(sender, **kwargs):
            received.append(kwargs)

        entry_reviewed.connect(listener)
        try:
            updated = review.grade(user, ephemeral.id, True, today=DUE)
        finally:
            entry_reviewed.disconnect(listener)

        assert received == [{
            'user_id': user.user_id,
            'entry': updated,
            'passed': True,
            'previous_stage': 0,
        }]

    def test_unknown_entry(self, review, user):
        with pytest.raises(NotFoundError):
            review.grade(user, 'missing', True, today=DUE)

    def test_other_users_entry_not_found(self, review, other_user, ephemeral):
        with pytest.raises(NotFoundError):
            review.grade(other_user, ephemeral.id, True, today=DUE)


class TestPostpone:

    def test_moves_due_date_only(self, review, user, ephemeral):
        updated = review.postpone(user, ephemeral.id, days=3, today=DUE)
        assert updated.next_due == datetime.date(2024, 1, 11)
        assert updated.stage == 0
        assert updated.last_tested is None

    @pytest.mark.parametrize('days', [0, -2, '2', True, 1.5, 3651, 10 ** 9])
    def test_days_must_be_positive_int(self, review, user, ephemeral, days):
        with pytest.raises(ValidationError):
            review.postpone(user, ephemeral.id, days=days, today=DUE)


def test_postpone_accepts_upper_bound(review, user, ephemeral):
    updated = review.postpone(user, ephemeral.id, days=3650, today=DUE)
    assert updated.next_due == DUE + datetime.timedelta(days=3650)
