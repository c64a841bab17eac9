from pathlib import Path

import pytest

from shadowgen.io import load_model

MODELS_DIR = Path(__file__).resolve().parents[1] / "fixtures" / "models"


def test_load_single_file_model():
    model = load_model(MODELS_DIR / "widget" / "shadow_model.yaml")

    assert model["packages"] == ["com.app"]
    assert model["shadows"][0]["shadow"] == "shadows.ShadowWidget"
    assert model["extra_shadows"][0]["real"] == "com.app.Foo"


def test_load_split_model_merges_parts_in_fixed_order():
    model = load_model(MODELS_DIR / "split")

    shadows = [item["shadow"] for item in model["shadows"]]
    assert shadows == [
        "org.example.shadows.ShadowList",
        # shadows/*.yaml in sorted filename order
        "org.example.shadows.ShadowMap.ShadowEntry",
        "org.example.shadows.ShadowView",
    ]
    assert len(model["imports"]) == 5
    assert model["extra_shadows"] == [
        {"shadow": "org.example.shadows.ShadowHidden", "real": "com.app.internal.Hidden"}
    ]


def test_part_file_path_loads_whole_split_model():
    model = load_model(MODELS_DIR / "split" / "10_shadows.yaml")

    assert len(model["shadows"]) == 3


def test_missing_path_raises():
    with pytest.raises(FileNotFoundError):
        load_model(MODELS_DIR / "does_not_exist.yaml")


def test_top_level_list_is_rejected(tmp_path: Path):
    path = tmp_path / "model.yaml"
    path.write_text("- a\n- b\n", encoding="utf-8")

    with pytest.raises(TypeError):
        load_model(path)


def test_unparsable_yaml_is_value_error(tmp_path: Path):
    path = tmp_path / "model.yaml"
    path.write_text("shadows: [unclosed\n", encoding="utf-8")

    with pytest.raises(ValueError):
        load_model(path)


def test_empty_part_file_contributes_nothing(tmp_path: Path):
    (tmp_path / "00_imports.yaml").write_text("", encoding="utf-8")
    (tmp_path / "30_packages.yaml").write_text("packages: [com.app]\n", encoding="utf-8")

    assert load_model(tmp_path) == {"packages": ["com.app"]}


def test_conflicting_scalars_across_parts_raise(tmp_path: Path):
    (tmp_path / "00_imports.yaml").write_text("owner: a\n", encoding="utf-8")
    (tmp_path / "30_packages.yaml").write_text("owner: b\n", encoding="utf-8")

    with pytest.raises(ValueError, match="merge conflict"):
        load_model(tmp_path)
