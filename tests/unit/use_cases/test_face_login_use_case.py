from datetime import timedelta

import pytest

from access_sentinel.adapter.services.euclidean_embedding_matcher import EuclideanEmbeddingMatcher
from access_sentinel.app.use_cases.auth.face_login_use_case import FaceLoginUseCase
from access_sentinel.domain.entities import AdmissionOutcome
from access_sentinel.domain.errors import ErrorCode
from tests.fixtures.factories import audited_actions, created_notifications, make_account


@pytest.fixture
def use_case(mock_uow, clock, locks):
    return FaceLoginUseCase(mock_uow, clock, locks, EuclideanEmbeddingMatcher(0.5))


def given_candidates(mock_uow, *accounts):
    mock_uow.accounts.list_face_candidates.return_value = list(accounts)
    mock_uow.accounts.get_for_update.side_effect = lambda account_id: next(
        a for a in accounts if a.id == account_id
    )


@pytest.mark.asyncio
async def test_face_login_success(mock_uow, clock, use_case):
    alice = make_account(face_embedding=[0.1, 0.2, 0.3])
    given_candidates(mock_uow, alice)

    result = await use_case.execute([0.1, 0.2, 0.31], "Android 13")

    assert result.is_ok()
    assert result.value.outcome == AdmissionOutcome.authenticated
    assert result.value.session.account.id == str(alice.id)
    assert result.value.session.account.has_face_embedding is True
    assert "face_embedding" not in result.value.session.account.model_dump()
    assert audited_actions(mock_uow) == ["login_success_user_face_recognition"]
    assert created_notifications(mock_uow)[0].related_info["login_method"] == "face_recognition"


@pytest.mark.asyncio
async def test_face_login_no_match(mock_uow, use_case):
    given_candidates(mock_uow, make_account(face_embedding=[1.0, 1.0, 1.0]))

    result = await use_case.execute([0.0, 0.0, 0.0], "Windows")

    assert result.is_err()
    assert result.error.code == ErrorCode.NOT_FOUND
    assert audited_actions(mock_uow) == ["face_login_fail_no_match"]
    mock_uow.accounts.get_for_update.assert_not_called()


@pytest.mark.asyncio
async def test_face_login_picks_closest_candidate(mock_uow, use_case):
    # Both are under the threshold; the second is closer
    bob = make_account(email="bob@example.com", face_embedding=[0.4, 0.0])
    carol = make_account(email="carol@example.com", face_embedding=[0.1, 0.0])
    given_candidates(mock_uow, bob, carol)

    result = await use_case.execute([0.0, 0.0], "Windows")

    assert result.value.session.account.email == "carol@example.com"


@pytest.mark.asyncio
async def test_face_login_respects_block(mock_uow, clock, use_case):
    alice = make_account(
        face_embedding=[0.1, 0.2], blocked=True, blocked_until=clock.now() + timedelta(minutes=2)
    )
    given_candidates(mock_uow, alice)

    result = await use_case.execute([0.1, 0.2], "Windows")

    assert result.error.code == ErrorCode.ACCOUNT_BLOCKED
    assert audited_actions(mock_uow) == ["face_login_fail_blocked"]


@pytest.mark.asyncio
async def test_face_login_applies_os_check(mock_uow, use_case):
    alice = make_account(face_embedding=[0.1, 0.2])
    given_candidates(mock_uow, alice)

    result = await use_case.execute([0.1, 0.2], "macOS")

    assert result.error.code == ErrorCode.OS_NOT_ALLOWED
    assert alice.blocked is True
    assert audited_actions(mock_uow) == ["face_login_fail_os_block"]


@pytest.mark.asyncio
async def test_face_login_applies_daily_limit(mock_uow, clock, use_case):
    alice = make_account(
        face_embedding=[0.1, 0.2], attempts_today=5, last_attempt_date=clock.today()
    )
    given_candidates(mock_uow, alice)

    result = await use_case.execute([0.1, 0.2], "Windows")

    assert result.error.code == ErrorCode.DAILY_LIMIT_EXCEEDED
    assert audited_actions(mock_uow) == ["face_login_fail_daily_limit"]
