from datetime import timedelta

import pyotp
import pytest

from access_sentinel.adapter.services.pyotp_totp_provider import PyOtpTotpProvider
from access_sentinel.app.use_cases.auth.verify_two_factor_use_case import VerifyTwoFactorUseCase
from access_sentinel.domain.entities import AdmissionOutcome
from access_sentinel.domain.errors import ErrorCode
from tests.fixtures.factories import audited_actions, make_account, make_admin

SECRET = "JBSWY3DPEHPK3PXP"


@pytest.fixture
def use_case(mock_uow, clock, locks):
    return VerifyTwoFactorUseCase(mock_uow, clock, locks, PyOtpTotpProvider())


@pytest.mark.asyncio
async def test_valid_code_admits_admin(mock_uow, clock, use_case):
    admin = make_admin(two_factor_enabled=True, two_factor_secret=SECRET, attempts_today=1)
    mock_uow.accounts.get_for_update.return_value = admin
    token = pyotp.TOTP(SECRET).at(clock.now())

    result = await use_case.execute(admin.id, token, "Windows")

    assert result.is_ok()
    assert result.value.outcome == AdmissionOutcome.authenticated
    assert admin.attempts_today == 0
    assert audited_actions(mock_uow) == ["login_success_admin_2fa"]


@pytest.mark.asyncio
async def test_previous_step_code_is_accepted(mock_uow, clock, use_case):
    admin = make_admin(two_factor_enabled=True, two_factor_secret=SECRET)
    mock_uow.accounts.get_for_update.return_value = admin
    token = pyotp.TOTP(SECRET).at(clock.now() - timedelta(seconds=30))

    result = await use_case.execute(admin.id, token, "Windows")

    assert result.is_ok()


@pytest.mark.asyncio
async def test_wrong_code_has_no_lockout_side_effects(mock_uow, clock, use_case):
    admin = make_admin(
        two_factor_enabled=True,
        two_factor_secret=SECRET,
        attempts_today=1,
        last_attempt_date=clock.today(),
    )
    mock_uow.accounts.get_for_update.return_value = admin
    token = pyotp.TOTP(SECRET).at(clock.now() + timedelta(minutes=5))

    result = await use_case.execute(admin.id, token, "Windows")

    assert result.error.code == ErrorCode.TWO_FACTOR_INVALID
    assert admin.attempts_today == 1
    assert admin.blocked is False
    assert audited_actions(mock_uow) == ["login_fail_2fa_token"]
    mock_uow.accounts.update.assert_not_called()


@pytest.mark.asyncio
async def test_two_factor_not_enabled(mock_uow, use_case):
    admin = make_admin()
    mock_uow.accounts.get_for_update.return_value = admin

    result = await use_case.execute(admin.id, "123456", "Windows")

    assert result.error.code == ErrorCode.ENROLLMENT_MISSING


@pytest.mark.asyncio
async def test_user_accounts_have_no_second_factor(mock_uow, use_case):
    user = make_account(two_factor_enabled=True, two_factor_secret=SECRET)
    mock_uow.accounts.get_for_update.return_value = user

    result = await use_case.execute(user.id, "123456", "Windows")

    assert result.error.code == ErrorCode.ENROLLMENT_MISSING


@pytest.mark.asyncio
async def test_unknown_account(mock_uow, use_case):
    result = await use_case.execute(make_admin().id, "123456", "Windows")

    assert result.error.code == ErrorCode.NOT_FOUND
    assert audited_actions(mock_uow) == ["login_fail_not_found"]
