import boa
from eth_account import Account

from script.settings import Settings


def load_private_key_account(settings: Settings):
    """Make ``PRIVATE_KEY`` boa's sender on a live network.

    Returns the account's address, or ``None`` when no key is configured and
    boa keeps whatever sender the network was set up with.
    """
    if not settings.private_key:
        return None
    account = Account.from_key(settings.private_key)
    boa.env.add_account(account, force_eoa=True)
    print(f"Using account {account.address}")
    return account.address
