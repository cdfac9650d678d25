import pytest

from cinder import errors
from cinder.types.environment import Environment
from cinder.types.literal import Literal

# -----------------------------------------------------
# add / get
# -----------------------------------------------------

def test_add_then_get_returns_same_object():
    env = Environment()
    value = Literal(42)
    env.add("x", value)
    assert env.get("x") is value


def test_add_duplicate_in_same_frame_fails():
    env = Environment()
    env.add("x", Literal(1))
    with pytest.raises(errors.DuplicateBinding) as exc:
        env.add("x", Literal(2))
    assert exc.value.name == "x"
    # first binding survives
    assert env.get("x") == Literal(1)


def test_add_same_name_in_inner_frame_shadows_outer():
    env = Environment()
    env.add("x", Literal("outer"))
    env.new_frame()
    env.add("x", Literal("inner"))
    assert env.get("x") == Literal("inner")


def test_get_unbound_fails():
    env = Environment()
    with pytest.raises(errors.UnboundName):
        env.get("missing")


def test_get_scans_innermost_first_and_falls_back_to_outer():
    env = Environment()
    env.add("g", Literal("global"))
    env.new_frame()
    env.add("a", Literal("a1"))
    env.new_frame()
    assert env.get("a") == Literal("a1")
    assert env.get("g") == Literal("global")


# -----------------------------------------------------
# change
# -----------------------------------------------------

def test_change_local_binding():
    env = Environment()
    env.new_frame()
    env.add("x", Literal(1))
    env.change("x", Literal(2))
    assert env.get("x") == Literal(2)


def test_change_updates_innermost_match_only():
    env = Environment()
    env.new_frame()
    env.add("x", Literal("outer"))
    env.new_frame()
    env.add("x", Literal("inner"))
    env.change("x", Literal("changed"))
    assert env.frames[2].vars["x"] == Literal("changed")
    assert env.frames[1].vars["x"] == Literal("outer")


def test_change_reaches_outer_local_frame():
    env = Environment()
    env.new_frame()
    env.add("x", Literal(1))
    env.new_frame()
    env.change("x", Literal(2))
    assert env.frames[1].vars["x"] == Literal(2)


def test_change_global_fails_with_immutable_global():
    env = Environment()
    env.add("g", Literal(1))
    env.new_frame()
    with pytest.raises(errors.ImmutableGlobal) as exc:
        env.change("g", Literal(2))
    assert exc.value.name == "g"
    assert env.get("g") == Literal(1)


def test_change_global_fails_with_only_global_frame():
    env = Environment()
    env.add("g", Literal(1))
    with pytest.raises(errors.ImmutableGlobal):
        env.change("g", Literal(2))


def test_change_unbound_fails():
    env = Environment()
    env.new_frame()
    with pytest.raises(errors.UnboundName):
        env.change("nope", Literal(1))


def test_change_prefers_local_shadow_over_global():
    env = Environment()
    env.add("x", Literal("global"))
    env.new_frame()
    env.add("x", Literal("local"))
    env.change("x", Literal("changed"))
    assert env.get("x") == Literal("changed")
    assert env.global_frame.vars["x"] == Literal("global")


# -----------------------------------------------------
# frames and globals_only
# -----------------------------------------------------

def test_scope_pops_frame_on_exit():
    env = Environment()
    with env.scope():
        env.add("tmp", Literal(1))
        assert env.depth == 2
    assert env.depth == 1
    with pytest.raises(errors.UnboundName):
        env.get("tmp")


def test_scope_pops_frame_when_body_raises():
    env = Environment()
    with pytest.raises(errors.UnboundName):
        with env.scope():
            env.add("tmp", Literal(1))
            env.get("missing")
    assert env.depth == 1
    assert "tmp" not in env


def test_global_frame_cannot_be_popped():
    env = Environment()
    with pytest.raises(RuntimeError):
        env.pop_frame()


def test_globals_only_hides_locals():
    env = Environment()
    env.add("g", Literal(1))
    env.new_frame()
    env.add("local", Literal(2))
    g_env = env.globals_only()
    assert g_env.depth == 1
    assert g_env.get("g") == Literal(1)
    with pytest.raises(errors.UnboundName):
        g_env.get("local")


def test_globals_only_shares_the_global_frame():
    env = Environment()
    g_env = env.globals_only()
    env.add("late", Literal("seen"))
    assert g_env.get("late") == Literal("seen")
    assert g_env.global_frame is env.global_frame


def test_globals_only_frames_do_not_leak_back():
    env = Environment()
    g_env = env.globals_only()
    g_env.new_frame()
    g_env.add("x", Literal(1))
    assert "x" not in env
    assert env.depth == 1


def test_str_and_repr():
    env = Environment()
    env.add("x", Literal(1))
    assert str(env) == "{x: 1}"
    env.new_frame()
    env.add("y", Literal("two"))
    assert str(env) == "{y: two} -> ..."
    assert repr(env) == "<Environment chain: {y: two} -> {x: 1}>"


def test_frame_membership():
    env = Environment()
    env.add("x", Literal(1))
    assert "x" in env.global_frame
    assert "y" not in env.global_frame
