#!/usr/bin/env python3
# Copyright 2026 The contract_harness Authors
# SPDX-License-Identifier: Apache-2.0

"""Unit tests for quickcheck settings."""

import pytest

from contract_harness.core.settings import (
    QuickcheckSettings,
    get_default_settings,
    set_default_settings,
    settings_scope,
)


class TestQuickcheckSettings:

    def test_defaults(self):
        settings = QuickcheckSettings()
        assert settings.pool_size == 100
        assert settings.size_bound == 100
        assert settings.edge_probability == 0.25
        assert settings.seed is None
        assert settings.verbose is False

    @pytest.mark.parametrize("field,value", [
        ("pool_size", 0),
        ("size_bound", -1),
        ("max_depth", -1),
        ("edge_probability", 1.5),
        ("edge_probability", -0.1),
    ])
    def test_invalid_values(self, field, value):
        with pytest.raises(ValueError, match=field):
            QuickcheckSettings(**{field: value})

    def test_with_changes_ignores_none(self):
        settings = QuickcheckSettings(pool_size=10)
        changed = settings.with_changes(pool_size=None, seed=3)
        assert changed.pool_size == 10
        assert changed.seed == 3
        assert settings.seed is None

    def test_frozen(self):
        with pytest.raises(AttributeError):
            QuickcheckSettings().pool_size = 5


class TestDefaults:

    def test_scope_restores_previous_defaults(self):
        before = get_default_settings()
        with settings_scope(pool_size=7, seed=1) as scoped:
            assert scoped.pool_size == 7
            assert get_default_settings() is scoped
        assert get_default_settings() is before

    def test_scope_restores_after_error(self):
        before = get_default_settings()
        with pytest.raises(RuntimeError):
            with settings_scope(pool_size=3):
                raise RuntimeError("stop")
        assert get_default_settings() is before

    def test_set_default_settings_returns_previous(self):
        custom = QuickcheckSettings(pool_size=9)
        previous = set_default_settings(custom)
        try:
            assert get_default_settings() is custom
        finally:
            assert set_default_settings(previous) is custom
