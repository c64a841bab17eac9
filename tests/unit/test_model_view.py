import pytest

from shadowgen.constants import DEFAULT_IMPORTS, UNBOUNDED
from shadowgen.model import Association, ResetterSpec, TypeParameter
from shadowgen.model_view import (
    build_shadow_model,
    package_of,
    referent_for,
)


@pytest.mark.parametrize(
    "name,expected",
    [
        ("com.app.Widget", "com.app"),
        ("com.app.Registry.Entry", "com.app"),
        ("Widget", ""),
    ],
)
def test_package_of(name, expected):
    assert package_of(name) == expected


def test_referent_uses_simple_name_only_when_imported():
    imports = frozenset({"shadows.ShadowWidget"})

    assert referent_for("shadows.ShadowWidget", imports) == "ShadowWidget"
    assert referent_for("shadows.ShadowFoo", imports) == "shadows.ShadowFoo"


def test_build_example_model():
    model = build_shadow_model(
        {
            "imports": ["shadows.ShadowWidget"],
            "packages": ["com.app"],
            "shadows": [
                {
                    "shadow": "shadows.ShadowWidget",
                    "real": "com.app.Widget",
                    "resetter": "reset",
                    "min_version": 21,
                }
            ],
            "extra_shadows": [{"shadow": "shadows.ShadowFoo", "real": "com.app.Foo"}],
        }
    )

    assert model.imports == ("shadows.ShadowWidget",)
    assert model.reflected_associations == (
        Association("com.app.Widget", "shadows.ShadowWidget"),
    )
    assert model.extra_associations == (Association("com.app.Foo", "shadows.ShadowFoo"),)
    assert model.association_count == 2
    assert model.resetters == (ResetterSpec("ShadowWidget", "reset", 21, UNBOUNDED),)
    assert model.packages == ("com.app",)

    (accessor,) = model.accessors
    assert accessor.shadow_type.referent == "ShadowWidget"
    assert accessor.real_type.referent == "com.app.Widget"
    assert accessor.is_public


def test_imports_default_when_absent():
    model = build_shadow_model({})

    assert model.imports == DEFAULT_IMPORTS
    assert model.association_count == 0


def test_packages_derived_in_first_seen_order_without_duplicates():
    model = build_shadow_model(
        {
            "shadows": [
                {"shadow": "s.ShadowB", "real": "pkg.b.B"},
                {"shadow": "s.ShadowA", "real": "pkg.a.A"},
                {"shadow": "s.ShadowB2", "real": "pkg.b.B2"},
            ],
            "extra_shadows": [{"shadow": "s.ShadowC", "real": "pkg.c.C"}],
        }
    )

    assert model.packages == ("pkg.b", "pkg.a", "pkg.c")


def test_explicit_empty_packages_are_kept_empty():
    model = build_shadow_model(
        {"packages": [], "shadows": [{"shadow": "s.ShadowA", "real": "pkg.a.A"}]}
    )

    assert model.packages == ()


def test_binary_name_feeds_table_and_canonical_name_feeds_referent():
    model = build_shadow_model(
        {
            "shadows": [
                {
                    "shadow": "s.Outer.ShadowInner",
                    "binary_name": "s.Outer$ShadowInner",
                    "real": "a.Inner",
                    "resetter": "reset",
                }
            ]
        }
    )

    assert model.reflected_associations[0].shadow_name == "s.Outer$ShadowInner"
    assert model.resetters[0].owner == "s.Outer.ShadowInner"


def test_real_type_mapping_carries_visibility_and_type_parameters():
    model = build_shadow_model(
        {
            "imports": ["java.lang.Comparable"],
            "shadows": [
                {
                    "shadow": "s.ShadowBox",
                    "deprecated": True,
                    "real": {
                        "name": "a.Box",
                        "public": False,
                        "type_parameters": [
                            {"name": "T", "bounds": ["java.lang.Comparable", "a.Marker"]},
                            "U",
                        ],
                    },
                }
            ],
        }
    )

    (accessor,) = model.accessors
    assert not accessor.is_public
    assert accessor.deprecated
    assert accessor.type_parameters == (
        TypeParameter("T", ("Comparable", "a.Marker")),
        TypeParameter("U"),
    )


def test_accessor_can_be_turned_off_per_shadow():
    model = build_shadow_model(
        {"shadows": [{"shadow": "s.ShadowA", "real": "a.A", "accessor": False}]}
    )

    assert model.accessors == ()
    assert model.association_count == 1


def test_no_resetter_without_method():
    model = build_shadow_model(
        {"shadows": [{"shadow": "s.ShadowA", "real": "a.A", "min_version": 3}]}
    )

    assert model.resetters == ()


@pytest.mark.parametrize(
    "raw",
    [
        {"shadows": {"shadow": "s.A"}},
        {"shadows": ["s.A"]},
        {"shadows": [{"real": "a.A"}]},
        {"shadows": [{"shadow": "s.A", "real": 3}]},
        {"extra_shadows": [{"shadow": "s.A"}]},
        {"imports": "java.util.Map"},
    ],
)
def test_malformed_models_raise_type_error(raw):
    with pytest.raises(TypeError):
        build_shadow_model(raw)


@pytest.mark.parametrize(
    "item",
    [
        {"shadow": "s.A", "real": {"name": "a.A", "public": "false"}},
        {"shadow": "s.A", "real": "a.A", "deprecated": "yes"},
        {"shadow": "s.A", "real": "a.A", "accessor": 1},
    ],
)
def test_flags_must_be_real_booleans(item):
    with pytest.raises(TypeError, match="Expected true/false"):
        build_shadow_model({"shadows": [item]})


@pytest.mark.parametrize(
    "bounds",
    [{"min_version": "abc"}, {"max_version": True}, {"min_version": 21.5}],
)
def test_version_bounds_must_be_integers(bounds):
    item = {"shadow": "s.A", "real": "a.A", "resetter": "reset", **bounds}

    with pytest.raises(TypeError, match="Expected integer API level"):
        build_shadow_model({"shadows": [item]})
