import pytest

from vicore.keymaps import (
    ActionRef,
    Binding,
    KeyInput,
    KeymapConflictError,
    KeymapRegistry,
    SpecialKey,
)
from vicore.keymaps.defaults import DEFAULT_BINDINGS, load_default_keymaps
from vicore.runtime import EditorMode


def make_action(action_id: str = "core.test") -> ActionRef:
    return ActionRef(id=action_id, handler=lambda *args, **kwargs: None)


def make_binding(
    *,
    binding_id: str,
    mode: str = "normal",
    key: str = "x",
    action_id: str = "core.test",
) -> Binding:
    return Binding(id=binding_id, mode=mode, key=key, action_id=action_id)


def test_register_binding_success() -> None:
    registry = KeymapRegistry()
    action = make_action()
    registry.register_action(action)
    binding = make_binding(binding_id="normal.x")

    registry.register_binding(binding)

    assert registry.stats().binding_count == 1
    assert list(registry.iter_bindings(mode="normal")) == [binding]


def test_register_binding_conflict_detection() -> None:
    registry = KeymapRegistry()
    registry.register_action(make_action())

    binding = make_binding(binding_id="normal.x")
    registry.register_binding(binding)

    with pytest.raises(KeymapConflictError):
        registry.register_binding(make_binding(binding_id="normal.x.duplicate"))


def test_same_key_in_other_mode_is_not_a_conflict() -> None:
    registry = KeymapRegistry()
    registry.register_action(make_action())

    registry.register_binding(make_binding(binding_id="normal.x"))
    registry.register_binding(make_binding(binding_id="insert.x", mode="insert"))

    assert registry.stats().modes == ("insert", "normal")


def test_register_binding_unknown_action() -> None:
    registry = KeymapRegistry()

    with pytest.raises(KeyError):
        registry.register_binding(make_binding(binding_id="normal.x"))


def test_register_binding_with_replace() -> None:
    registry = KeymapRegistry()
    registry.register_action(make_action())

    first = make_binding(binding_id="binding")
    second = make_binding(binding_id="binding.other")

    registry.register_binding(first)
    registry.register_binding(second, replace=True)

    assert list(registry.iter_bindings()) == [second]


def test_unregister_binding() -> None:
    registry = KeymapRegistry()
    registry.register_action(make_action())
    binding = make_binding(binding_id="binding")
    registry.register_binding(binding)

    removed = registry.unregister_binding("binding")

    assert removed == binding
    assert registry.stats().binding_count == 0
    assert registry.resolve("normal", "x") is None


def test_binding_accepts_mode_enum() -> None:
    binding = Binding(
        id="b", mode=EditorMode.INSERT, key="ESC", action_id="core.exit_to_normal"
    )

    assert binding.mode == "insert"


def test_resolve_uses_key_token() -> None:
    registry = KeymapRegistry()
    registry.register_action(make_action())
    registry.register_binding(make_binding(binding_id="ctrl", key="ctrl+c"))

    match = registry.resolve("normal", KeyInput.ctrl("C").token)

    assert match is not None
    assert match.binding.id == "ctrl"
    assert match.action.id == "core.test"


def test_load_default_keymaps_covers_every_mode() -> None:
    registry = KeymapRegistry()

    load_default_keymaps(registry)

    assert registry.stats().binding_count == len(DEFAULT_BINDINGS)
    assert registry.stats().modes == ("command", "insert", "normal")
    assert registry.resolve("normal", "i").action.id == "core.enter_insert"
    assert registry.resolve("insert", SpecialKey.ESC.value).action.id == (
        "core.exit_to_normal"
    )
    assert registry.resolve("command", "ENTER").action.id == "command.submit_line"


def test_load_default_keymaps_twice_requires_replace() -> None:
    registry = KeymapRegistry()
    load_default_keymaps(registry)

    with pytest.raises(ValueError):
        load_default_keymaps(registry)

    load_default_keymaps(registry, replace=True)
    assert registry.stats().binding_count == len(DEFAULT_BINDINGS)


def test_load_default_keymaps_extra_and_excluded_bindings() -> None:
    registry = KeymapRegistry()
    custom = Binding(
        id="normal.enter_insert.custom",
        mode="normal",
        key="o",
        action_id="core.enter_insert",
    )

    load_default_keymaps(
        registry,
        extra_bindings=(custom,),
        exclude_bindings=("normal.enter_insert.i",),
    )

    assert registry.resolve("normal", "i") is None
    assert registry.resolve("normal", "o").binding == custom


def test_key_input_tokens() -> None:
    assert KeyInput.char("a").token == "a"
    assert KeyInput.ctrl("H").token == "ctrl+h"
    assert KeyInput.special(SpecialKey.PAGE_UP).token == "PAGE_UP"
    assert KeyInput.special(SpecialKey.TAB).is_printable
    assert not KeyInput.ctrl("c").is_printable
