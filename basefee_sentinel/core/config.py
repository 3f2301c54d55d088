"""
Application configuration for the base fee sentinel.

Provides environment-aware settings with conservative defaults. The trigger
threshold (2% or 3% in deployed traps) and the comparator (strict or inclusive)
are both configurable.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Comparator(str, Enum):
	"""How the observed change is compared against the threshold."""

	GT = "gt"
	GTE = "gte"


class TrapConfig(BaseModel):
	"""
	Decision engine settings.

	Notes:
	- threshold_percent: minimum relative change (in whole percent) that triggers.
	- comparator: "gte" (inclusive, default) or "gt" (strict).
	- truncate_percent: compare the truncated integer percentage instead of the
	  exact cross-multiplied values. Only useful to reproduce legacy traps.
	"""

	threshold_percent: int = Field(3, ge=0, description="Trigger threshold in percent")
	comparator: Comparator = Field(Comparator.GTE, description="Threshold comparison operator")
	truncate_percent: bool = Field(
		False, description="Compare floor(delta * 100 / previous) instead of exact values"
	)


class CollectorConfig(BaseModel):
	"""
	Ambient base fee source settings.

	Notes:
	- rpc_url: Ethereum JSON-RPC endpoint; required for the RPC source only.
	- block_tag: block to sample ("latest", "pending", or a hex number).
	"""

	rpc_url: Optional[str] = Field(None, description="JSON-RPC endpoint")
	block_tag: str = Field("latest", description="Block tag passed to eth_getBlockByNumber")
	request_timeout: float = Field(10.0, gt=0.0)


class RelayConfig(BaseModel):
	"""
	Where the host forwards positive decisions.
	"""

	url: str = Field("http://127.0.0.1:8000/broadcast", description="Relay broadcast endpoint")
	request_timeout: float = Field(5.0, gt=0.0)


class Config(BaseSettings):
	"""
	Global configuration with environment overrides.

	Nested values use a double underscore, e.g. BASEFEE_TRAP__THRESHOLD_PERCENT=2.
	"""

	model_config = SettingsConfigDict(
		env_prefix="BASEFEE_",
		env_nested_delimiter="__",
		env_file=".env",
		extra="ignore",
	)

	log_level: str = Field("INFO", description="Default logging level")
	logs_dir: Path = Field(Path("logs"), description="Directory for log files")
	trap: TrapConfig = TrapConfig()
	collector: CollectorConfig = CollectorConfig()
	relay: RelayConfig = RelayConfig()

	def model_post_init(self, __context: object) -> None:
		self.logs_dir.mkdir(parents=True, exist_ok=True)


config = Config()
