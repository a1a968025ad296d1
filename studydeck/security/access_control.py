# -*- coding: utf-8 -*-

"""
studydeck/security/access_control.py
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
Access control for modules and their terms.

A module is visible to its owner and, when public, to everyone. The decision
is a pure function of the module row and the requesting user: it performs no
I/O and must be evaluated before any progress synchronization. A missing
module is reported by the caller as NotFound before this check runs.
"""
from studydeck.config.logger import configure_logger
from studydeck.domain.enums import AccessDecision
from studydeck.domain.models import Module
from studydeck.utils.exceptions import PermissionDeniedError

logger = configure_logger(__name__)


def is_module_owner(module: Module, user_id: int) -> bool:
    """Check whether the user owns the module."""
    return module.owner_id == user_id


def check_module_access(module: Module, user_id: int) -> AccessDecision:
    """
    Decide whether a user may see or act on a module.

    Args:
        module: Module row
        user_id: ID of the requesting user

    Returns:
        AccessDecision.ALLOWED for the owner or a public module,
        AccessDecision.FORBIDDEN otherwise
    """
    if is_module_owner(module, user_id) or not module.is_private:
        return AccessDecision.ALLOWED
    return AccessDecision.FORBIDDEN


def ensure_module_access(module: Module, user_id: int) -> None:
    """Raise PermissionDeniedError when the module is private to someone else."""
    if check_module_access(module, user_id) is AccessDecision.FORBIDDEN:
        logger.warning(
            f"❌ Пользователь {user_id} запросил приватный модуль {module.id}"
        )
        raise PermissionDeniedError("Module is private")


def ensure_module_owner(module: Module, user_id: int) -> None:
    """Raise PermissionDeniedError unless the user owns the module."""
    if not is_module_owner(module, user_id):
        logger.warning(
            f"❌ Пользователь {user_id} пытался изменить чужой модуль {module.id}"
        )
        raise PermissionDeniedError("You can only modify your own modules")
