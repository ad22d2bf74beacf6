import asyncio

import pytest

from access_sentinel.app.services.account_locks import AccountLocks
from access_sentinel.app.services.root_admin import RootAdminSettings
from access_sentinel.app.use_cases.auth.login_use_case import LoginUseCase
from tests.fixtures.factories import make_account


@pytest.mark.asyncio
async def test_same_key_is_serialized():
    locks = AccountLocks()
    order = []

    async def worker(name):
        async with locks.hold("alice"):
            order.append(f"{name}-in")
            await asyncio.sleep(0.01)
            order.append(f"{name}-out")

    await asyncio.gather(worker("a"), worker("b"))

    assert order in (["a-in", "a-out", "b-in", "b-out"], ["b-in", "b-out", "a-in", "a-out"])


@pytest.mark.asyncio
async def test_different_keys_do_not_block_each_other():
    locks = AccountLocks()
    inside = asyncio.Event()

    async def first():
        async with locks.hold("alice"):
            await asyncio.wait_for(inside.wait(), timeout=1)

    async def second():
        async with locks.hold("bob"):
            inside.set()

    await asyncio.gather(first(), second())


@pytest.mark.asyncio
async def test_idle_locks_are_dropped():
    locks = AccountLocks()

    async with locks.hold("alice"):
        assert len(locks) == 1

    assert len(locks) == 0


@pytest.mark.asyncio
async def test_concurrent_failed_logins_count_both(mock_uow, clock):
    account = make_account()
    mock_uow.accounts.get_by_email.return_value = account
    mock_uow.accounts.get_for_update.return_value = account
    use_case = LoginUseCase(
        mock_uow, clock, AccountLocks(), RootAdminSettings(email="root@example.com", password="x")
    )

    results = await asyncio.gather(
        use_case.execute("alice@example.com", "bad", "Windows"),
        use_case.execute("alice@example.com", "bad", "Windows"),
    )

    assert sorted(r.error.code.value for r in results) == ["ACCOUNT_BLOCKED", "INVALID_CREDENTIALS"]
    assert account.attempts_today == 2
    assert account.blocked is True
