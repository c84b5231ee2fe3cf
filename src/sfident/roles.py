"""Database role names and their external ids.

Database roles live inside a database and are addressed as ``DB.ROLE``.
External tools carry them under an id of the form
``DATABASEROLE###DATABASE:<db>###ROLE:<role>`` so they cannot collide with
account roles.
"""

from __future__ import annotations

from sfident._constants import DATABASE_ROLE_DIVIDER, DATABASE_ROLE_PREFIX
from sfident._sql_utils import trim_circumfix
from sfident.core import parse_strict
from sfident.errors import SfidentSplitError, SfidentValidationError


def database_role_external_id(database: str, role: str) -> str:
    """Build the external id for ``role`` inside ``database``."""
    return f"{DATABASE_ROLE_PREFIX}{database}{DATABASE_ROLE_DIVIDER}{role}"


def _split_external_id(external_id: str) -> list[str] | None:
    if not external_id.startswith(DATABASE_ROLE_PREFIX):
        return None
    parts = external_id[len(DATABASE_ROLE_PREFIX) :].split(DATABASE_ROLE_DIVIDER)
    if len(parts) != 2 or not parts[0] or not parts[1]:
        return None
    return parts


def is_database_role_external_id(external_id: str) -> bool:
    return _split_external_id(external_id) is not None


def parse_database_role_external_id(external_id: str) -> tuple[str, str]:
    """Return ``(database, role)`` from a database role external id."""
    parts = _split_external_id(external_id)
    if parts is None:
        raise SfidentValidationError(
            f"Role {external_id!r} is not in the expected database role format "
            f"'{DATABASE_ROLE_PREFIX}<database>{DATABASE_ROLE_DIVIDER}<role>'."
        )
    return parts[0], parts[1]


def parse_database_role_name(name: str) -> tuple[str, str]:
    """Return ``(database, role)`` from a ``DB.ROLE`` name.

    Either part may be quoted, e.g. ``"my db"."ROLE.X"``.
    """
    try:
        parsed = parse_strict(name)
    except SfidentSplitError as exc:
        raise SfidentValidationError(
            f"Role {name!r} is not a valid database role name."
        ) from exc
    if parsed.depth < 2:
        raise SfidentValidationError(f"Role {name!r} is not a database role.")
    return parsed.database, parsed.schema


def clean_grantee_name(grantee: str) -> str:
    """Drop the quotes the warehouse wraps around some grantee names.

    ``SHOW GRANTS OF ROLE`` returns users and database roles such as
    ``"Test User"`` or ``"DB.ROLE"`` wrapped in one pair of quotes. Inner
    quotes are left untouched.
    """
    return trim_circumfix(grantee)


def parse_database_role_grantee(grantee: str) -> tuple[str, str]:
    """Return ``(database, role)`` from a grantee name as listed in grants."""
    return parse_database_role_name(clean_grantee_name(grantee))
