"""Builders for ACL commands."""

from __future__ import annotations

from typing import Any

from .cmd import Cmd, cmd


def _integer(value: int, what: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{what} must be an integer")
    return value


def acl_load() -> Cmd:
    """ACL LOAD: reload the ACL rules from the configured ACL file."""
    return cmd("ACL").arg("LOAD")


def acl_save() -> Cmd:
    """ACL SAVE: write the current ACL rules to the configured ACL file."""
    return cmd("ACL").arg("SAVE")


def acl_list() -> Cmd:
    """ACL LIST: the currently active ACL rules."""
    return cmd("ACL").arg("LIST")


def acl_users() -> Cmd:
    """ACL USERS: the names of all configured users."""
    return cmd("ACL").arg("USERS")


def acl_getuser(username: Any) -> Cmd:
    """ACL GETUSER: the rules defined for an existing user."""
    return cmd("ACL").arg("GETUSER").arg(username)


def acl_setuser(username: Any) -> Cmd:
    """ACL SETUSER: create a user without any privilege."""
    return cmd("ACL").arg("SETUSER").arg(username)


def acl_deluser(usernames: Any) -> Cmd:
    """ACL DELUSER: delete users and drop their connections."""
    return cmd("ACL").arg("DELUSER").arg(usernames)


def acl_cat() -> Cmd:
    """ACL CAT: the available ACL categories."""
    return cmd("ACL").arg("CAT")


def acl_cat_categoryname(categoryname: Any) -> Cmd:
    """ACL CAT with a category: the commands in that category."""
    return cmd("ACL").arg("CAT").arg(categoryname)


def acl_genpass() -> Cmd:
    """ACL GENPASS: generate a 256-bit password."""
    return cmd("ACL").arg("GENPASS")


def acl_genpass_bits(bits: int) -> Cmd:
    """ACL GENPASS with a size: generate a password of ``bits`` bits."""
    return cmd("ACL").arg("GENPASS").arg(_integer(bits, "bits"))


def acl_whoami() -> Cmd:
    """ACL WHOAMI: the user the connection is authenticated as."""
    return cmd("ACL").arg("WHOAMI")


def acl_log(count: int) -> Cmd:
    """ACL LOG: the ``count`` most recent security events."""
    return cmd("ACL").arg("LOG").arg(_integer(count, "count"))


def acl_log_reset() -> Cmd:
    """ACL LOG RESET: clear the ACL log."""
    return cmd("ACL").arg("LOG").arg("RESET")


def acl_help() -> Cmd:
    """ACL HELP: a description of the subcommands."""
    return cmd("ACL").arg("HELP")