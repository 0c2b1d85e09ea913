"""
Warden Configuration Management
================================

Centralized configuration for the Warden toolkit using Python
dataclasses and TOML-based persistence.

Sections map one-to-one onto TOML tables::

    [global]
    log_level = "DEBUG"

    [hashing]
    memory_cost = 65536
    batch_workers = 8

References:
    - Wiggins, A. (2011). The Twelve-Factor App. https://12factor.net/
    - RFC 9106 (2021). Argon2 Memory-Hard Function for Password Hashing.
    - TOML v1.0.0 Specification. https://toml.io/en/v1.0.0
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field, asdict
from pathlib import Path
from typing import Any, Optional

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

from shared.errors import ConfigError


# Value a failed batch entry maps to.
ERROR_SENTINEL = "ERROR"

# ---------------------------------------------------------------------------
# Default configuration file path relative to the project root
# ---------------------------------------------------------------------------
_DEFAULT_CONFIG_PATH: Path = Path(__file__).resolve().parent.parent / "warden.toml"


# ========================== Tool-Specific Configs ==========================


@dataclass(frozen=False, slots=True)
class HashingConfig:
    """Configuration for the Argon2id hashing service.

    Defaults match the OWASP minimum recommendation for Argon2id
    (19 MiB memory, 2 iterations, 1 lane).

    Reference:
        OWASP Password Storage Cheat Sheet (2023).
    """

    time_cost: int = 2
    memory_cost: int = 19_456  # KiB
    parallelism: int = 1
    hash_len: int = 32
    salt_len: int = 16
    batch_workers: Optional[int] = None  # None -> executor default
    error_sentinel: str = ERROR_SENTINEL

    def validate(self) -> HashingConfig:
        """Reject parameter sets Argon2 cannot run with.

        Raises:
            ConfigError: If any cost or length is out of range.
        """
        if self.time_cost < 1:
            raise ConfigError(f"hashing.time_cost must be >= 1, got {self.time_cost}")
        if self.parallelism < 1:
            raise ConfigError(
                f"hashing.parallelism must be >= 1, got {self.parallelism}"
            )
        # Argon2 requires at least 8 KiB per lane.
        if self.memory_cost < 8 * self.parallelism:
            raise ConfigError(
                f"hashing.memory_cost must be >= {8 * self.parallelism} KiB, "
                f"got {self.memory_cost}"
            )
        if self.hash_len < 4 or self.salt_len < 8:
            raise ConfigError("hashing.hash_len must be >= 4 and salt_len >= 8")
        if self.batch_workers is not None and self.batch_workers < 1:
            raise ConfigError(
                f"hashing.batch_workers must be >= 1, got {self.batch_workers}"
            )
        return self


@dataclass(frozen=False, slots=True)
class ReportConfig:
    """Controls what the console and report layers reveal."""

    mask_passwords: bool = True
    include_hashes: bool = False


# =========================== Global Settings ===============================


@dataclass(frozen=False, slots=True)
class GlobalConfig:
    """Global settings shared across all Warden modules."""

    log_level: str = "INFO"
    log_file: Optional[str] = None
    log_json: bool = False
    output_dir: str = "output"
    debug: bool = False
    version: str = "1.0.0"


# =========================== Master Config =================================


@dataclass(frozen=False, slots=True)
class WardenConfig:
    """Master configuration aggregating all sections.

    Usage:
        >>> config = WardenConfig.load()                   # from default path
        >>> config = WardenConfig.load("custom.toml")      # from custom path
        >>> print(config.hashing.memory_cost)
        19456
    """

    global_settings: GlobalConfig = field(default_factory=GlobalConfig)
    hashing: HashingConfig = field(default_factory=HashingConfig)
    report: ReportConfig = field(default_factory=ReportConfig)

    # ------------------------------------------------------------------ #
    #  TOML Loading
    # ------------------------------------------------------------------ #

    @classmethod
    def load(cls, path: str | Path | None = None) -> WardenConfig:
        """Load configuration from a TOML file.

        If *path* is ``None`` the loader looks for ``warden.toml`` in the
        project root. Missing keys fall back to dataclass defaults.

        Args:
            path: Filesystem path to a TOML configuration file.

        Returns:
            A fully-populated :class:`WardenConfig` instance.

        Raises:
            FileNotFoundError: If *path* was given explicitly and does not exist.
            ConfigError: If the file is not valid TOML or a section fails
                validation.
        """
        config_path = Path(path) if path is not None else _DEFAULT_CONFIG_PATH

        if not config_path.exists():
            if path is not None:
                raise FileNotFoundError(
                    f"Configuration file not found: {config_path}"
                )
            return cls()

        try:
            with open(config_path, "rb") as fh:
                raw: dict[str, Any] = tomllib.load(fh)
        except tomllib.TOMLDecodeError as exc:
            raise ConfigError(f"Invalid TOML in {config_path}: {exc}") from exc

        config = cls(
            global_settings=cls._build_section(GlobalConfig, raw.get("global", {})),
            hashing=cls._build_section(HashingConfig, raw.get("hashing", {})),
            report=cls._build_section(ReportConfig, raw.get("report", {})),
        )
        config.hashing.validate()
        return config

    def to_dict(self) -> dict[str, Any]:
        """Serialise the entire configuration tree to a plain dictionary."""
        return asdict(self)

    @staticmethod
    def _build_section(cls: type, data: dict[str, Any]) -> Any:
        """Instantiate a dataclass *cls* using only the keys it declares.

        Unknown keys in the TOML source are silently ignored so that
        forward-compatible config files do not break older code.
        """
        valid_keys = {f.name for f in cls.__dataclass_fields__.values()}  # type: ignore[attr-defined]
        filtered = {k: v for k, v in data.items() if k in valid_keys}
        return cls(**filtered)


# ========================= Module-level convenience ========================

def get_config(path: str | Path | None = None) -> WardenConfig:
    """Module-level convenience wrapper around :meth:`WardenConfig.load`.

    Caches the result so that repeated imports share one instance.
    """
    if not hasattr(get_config, "_cached") or path is not None:
        get_config._cached = WardenConfig.load(path)  # type: ignore[attr-defined]
    return get_config._cached  # type: ignore[attr-defined]
