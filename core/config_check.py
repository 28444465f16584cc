"""Decide from the server's system status whether first-run setup is needed."""

from core.models import SystemStatus, SystemStatusEnum

_REASONS: dict[SystemStatusEnum, str] = {
    SystemStatusEnum.SETUP: "no configuration found",
    SystemStatusEnum.NEEDS_MIGRATION: "system is configured but the database needs migration",
    SystemStatusEnum.OK: "system is already configured",
}


def _migration_reason(status: SystemStatus) -> str:
    reason = _REASONS[SystemStatusEnum.NEEDS_MIGRATION]
    if status.database_schema is not None and status.app_schema is not None:
        reason += f" (schema {status.database_schema} -> {status.app_schema})"
    if status.database_path:
        reason += f": {status.database_path}"
    return reason


def needs_setup(status: SystemStatus) -> tuple[bool, str]:
    """Return (needs_setup, reason). Only the SETUP status runs the wizard."""
    if status.status is SystemStatusEnum.NEEDS_MIGRATION:
        return False, _migration_reason(status)
    reason = _REASONS.get(status.status, f"unknown status {status.status!r}")
    if status.configured:
        return False, reason
    if status.config_path:
        return True, f"unable to load configuration at {status.config_path}"
    return True, reason
