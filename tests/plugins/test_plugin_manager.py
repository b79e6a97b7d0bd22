"""Tests for PluginManager — registration and hook relay."""

from __future__ import annotations

import pytest

from orgdir.plugins.hookspecs import hookimpl
from orgdir.plugins.manager import PluginManager


class _DummyPlugin:
    def __init__(self) -> None:
        self.raises: list[tuple[str, str, str]] = []

    @hookimpl
    def post_raise(self, employee_id: str, old_salary: str, new_salary: str) -> None:
        self.raises.append((employee_id, old_salary, new_salary))


class _LifecycleRecorder:
    def __init__(self) -> None:
        self.calls: list[str] = []

    @hookimpl
    def post_register(self, kind: str, name: str) -> None:
        self.calls.append("post_register")

    @hookimpl
    def post_department_create(self, department_id: str, code: str) -> None:
        self.calls.append("post_department_create")

    @hookimpl
    def post_assign(self, employee_id: str, department_code: str) -> None:
        self.calls.append("post_assign")

    @hookimpl
    def post_unassign(self, employee_id: str, department_code: str) -> None:
        self.calls.append("post_unassign")

    @hookimpl
    def post_raise(self, employee_id: str, old_salary: str, new_salary: str) -> None:
        self.calls.append("post_raise")


class TestPluginManager:
    def test_every_lifecycle_hook_dispatches(self) -> None:
        pm = PluginManager()
        recorder = _LifecycleRecorder()
        pm.register_plugin(recorder)
        payloads = {
            "post_register": {"kind": "person", "name": "Ann Lee"},
            "post_department_create": {"department_id": "DEPT-0001", "code": "IT"},
            "post_assign": {"employee_id": "EMP0001", "department_code": "IT"},
            "post_unassign": {"employee_id": "EMP0001", "department_code": "IT"},
            "post_raise": {"employee_id": "EMP0001", "old_salary": "1", "new_salary": "2"},
        }
        for hook_name, payload in payloads.items():
            pm.dispatch(hook_name, payload)
        assert recorder.calls == list(payloads)

    def test_register_plugin(self) -> None:
        pm = PluginManager()
        pm.register_plugin(_DummyPlugin(), name="dummy")
        assert "dummy" in pm.list_plugin_names()

    def test_register_plugin_default_name(self) -> None:
        pm = PluginManager()
        pm.register_plugin(_DummyPlugin())
        assert "_DummyPlugin" in pm.list_plugin_names()

    def test_dispatch_calls_hook(self) -> None:
        pm = PluginManager()
        plugin = _DummyPlugin()
        pm.register_plugin(plugin)
        pm.dispatch(
            "post_raise", {"employee_id": "EMP0001", "old_salary": "1", "new_salary": "2"}
        )
        assert plugin.raises == [("EMP0001", "1", "2")]

    def test_dispatch_unknown_hook(self) -> None:
        with pytest.raises(AttributeError):
            PluginManager().dispatch("post_nothing", {})

    def test_discover_and_load_keeps_registered_plugins(self) -> None:
        pm = PluginManager()
        pm.register_plugin(_DummyPlugin(), name="dummy")
        assert "dummy" in pm.discover_and_load()
