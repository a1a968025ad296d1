# -*- coding: utf-8 -*-
"""
Unit тесты проверки доступа к модулям
"""

import pytest

from studydeck.domain.enums import AccessDecision
from studydeck.domain.models import Module
from studydeck.security.access_control import (check_module_access,
                                               ensure_module_access,
                                               ensure_module_owner,
                                               is_module_owner)
from studydeck.utils.exceptions import PermissionDeniedError


def _module(owner_id: int = 1, is_private: bool = True) -> Module:
    return Module(id=10, owner_id=owner_id, is_private=is_private, title="M", slug="m")


class TestCheckModuleAccess:
    """Решение о доступе к модулю"""

    def test_owner_reads_private_module(self):
        assert check_module_access(_module(is_private=True), 1) is AccessDecision.ALLOWED

    def test_stranger_is_forbidden_on_private_module(self):
        assert (
            check_module_access(_module(is_private=True), 2)
            is AccessDecision.FORBIDDEN
        )

    def test_anyone_reads_public_module(self):
        assert (
            check_module_access(_module(is_private=False), 2) is AccessDecision.ALLOWED
        )

    def test_is_module_owner(self):
        module = _module(owner_id=5)
        assert is_module_owner(module, 5)
        assert not is_module_owner(module, 6)


class TestEnsureHelpers:
    """Исключения при отказе в доступе"""

    def test_private_module_raises_forbidden(self):
        with pytest.raises(PermissionDeniedError) as exc_info:
            ensure_module_access(_module(is_private=True), 2)
        assert exc_info.value.status_code == 403
        assert exc_info.value.detail == "Module is private"

    def test_public_module_passes(self):
        ensure_module_access(_module(is_private=False), 2)

    def test_non_owner_cannot_modify_public_module(self):
        with pytest.raises(PermissionDeniedError) as exc_info:
            ensure_module_owner(_module(is_private=False), 2)
        assert exc_info.value.detail == "You can only modify your own modules"
