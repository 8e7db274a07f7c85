"""Tests for identifier role classification and the reporting decision."""

from camellint.config import RuleConfig, resolve_options
from camellint.estree.context import Role, classify, effective_parent, should_report
from camellint.tests.estree_builders import (
    array, assign, call, ident, literal, member, obj, obj_pattern, prop, stmt, var,
    with_parents,
)

ALWAYS = RuleConfig()
NEVER = resolve_options({"properties": "never"})


def test_bare_identifier():
    target = ident("first_name")
    with_parents(stmt(assign(target, literal("Nicholas"))))
    assert classify(target) is Role.BARE
    assert should_report(target, "first_name", ALWAYS)
    assert should_report(target, "first_name", NEVER)


def test_bare_constant_is_not_reported():
    target = ident("FIRST_NAME")
    with_parents(stmt(assign(target, literal("Nicholas"))))
    assert not should_report(target, "FIRST_NAME", ALWAYS)


def test_call_callee_is_exempt():
    callee = ident("do_something")
    with_parents(stmt(call(callee)))
    assert classify(callee) is Role.CALL_CALLEE
    assert not should_report(callee, "do_something", ALWAYS)


def test_call_argument_is_exempt_too():
    # the effective parent of an argument is the call itself
    arg = ident("some_value")
    with_parents(stmt(call(ident("f"), arg)))
    assert classify(arg) is Role.CALL_CALLEE


def test_member_callee_property_is_not_reported():
    prop_id = ident("do_something")
    with_parents(stmt(call(member(ident("foo"), prop_id))))
    assert classify(prop_id) is Role.MEMBER_PROPERTY
    assert effective_parent(prop_id)["type"] == "CallExpression"
    assert not should_report(prop_id, "do_something", ALWAYS)


def test_member_object_is_reported_whenever_underscored():
    base = ident("foo_bar")
    with_parents(stmt(array(member(base, ident("baz")))))
    assert classify(base) is Role.MEMBER_OBJECT
    assert should_report(base, "foo_bar", ALWAYS)
    assert not should_report(base, "foo_bar", NEVER)


def test_member_object_inside_call_is_still_reported():
    base = ident("foo_bar")
    with_parents(stmt(call(member(base, ident("baz")))))
    assert classify(base) is Role.MEMBER_OBJECT
    assert should_report(base, "foo_bar", ALWAYS)


def test_member_property_assignment_target():
    target = ident("foo_bar")
    with_parents(stmt(assign(member(ident("obj"), target), literal(1))))
    assert classify(target) is Role.MEMBER_PROPERTY
    assert should_report(target, "foo_bar", ALWAYS)
    assert not should_report(target, "foo_bar", NEVER)


def test_member_property_read_is_not_reported():
    read = ident("baz_boom")
    with_parents(var(ident("foo"), member(ident("bar"), read)))
    assert not should_report(read, "baz_boom", ALWAYS)


def test_member_to_member_assignment_reports_only_left_property():
    left_prop, right_prop = ident("bar_baz"), ident("bam_pow")
    with_parents(stmt(assign(member(ident("foo"), left_prop),
                             member(ident("boom"), right_prop))))
    assert should_report(left_prop, "bar_baz", ALWAYS)
    assert not should_report(right_prop, "bam_pow", ALWAYS)


def test_same_named_property_on_both_sides_is_reported_twice():
    left_prop, right_prop = ident("a_b"), ident("a_b")
    with_parents(stmt(assign(member(ident("x"), left_prop),
                             member(ident("y"), right_prop))))
    assert should_report(left_prop, "a_b", ALWAYS)
    assert should_report(right_prop, "a_b", ALWAYS)


def test_object_key():
    key = ident("bar_baz")
    with_parents(var(ident("o"), obj(prop(key, literal(1)))))
    assert classify(key) is Role.OBJECT_KEY
    assert should_report(key, "bar_baz", ALWAYS)
    assert not should_report(key, "bar_baz", NEVER)


def test_renamed_pattern_key_is_exempt():
    key, local = ident("category_id"), ident("category")
    with_parents(var(obj_pattern(prop(key, local)), ident("query")))
    assert classify(key) is Role.PATTERN_KEY
    assert not should_report(key, "category_id", ALWAYS)
    assert classify(local) is Role.OBJECT_KEY


def test_shorthand_pattern_node_is_checked():
    shared = ident("category_id")
    with_parents(var(obj_pattern(prop(shared, shared, shorthand=True)), ident("query")))
    assert classify(shared) is Role.OBJECT_KEY
    assert should_report(shared, "category_id", ALWAYS)


def test_checkable_name_decides_not_raw_name():
    target = ident("opt_camelCase")
    with_parents(stmt(assign(target, literal(0))))
    assert not should_report(target, "camelCase", ALWAYS)
