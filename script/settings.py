"""
Tooling configuration loaded from environment variables.

Uses ``pydantic-settings``; values can also come from a ``.env`` file in the
project root, the same file ``moccasin.toml`` points ``dot_env`` at.
"""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings

FRONT_END_CONSTANTS = Path("../nextjs-smartcontract-lottery-frontend/constants")


class Settings(BaseSettings):
    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}

    # ---- Live network ----
    sepolia_rpc_url: str = Field(default="", description="Sepolia JSON-RPC endpoint.")
    private_key: str = Field(
        default="",
        description="Hex-encoded private key used for live deployments.",
    )
    etherscan_api_key: str = Field(
        default="",
        description="Explorer API key; contract verification is skipped without it.",
    )

    # ---- Gas reporting ----
    gas_reporter_enabled: bool = Field(default=False)
    coinmarketcap_api_key: str = Field(
        default="",
        description=(
            "Accepted so the front-end project's .env can be shared; "
            "boa's gas profiler reports gas units, not fiat prices."
        ),
    )

    # ---- Front-end sync ----
    update_front_end: bool = Field(
        default=False,
        description="Export the Raffle address and ABI to the front-end after deploying.",
    )
    front_end_addresses_file: Path = Field(
        default=FRONT_END_CONSTANTS / "contractAddresses.json",
    )
    front_end_abi_file: Path = Field(default=FRONT_END_CONSTANTS / "abi.json")

    # ---- Staging tests ----
    staging_timeout_seconds: int = Field(
        default=300,
        ge=1,
        description="How long the staging suite waits for live keepers and VRF to pick a winner.",
    )
    staging_poll_interval_seconds: int = Field(default=5, ge=1)


def get_settings() -> Settings:
    return Settings()
