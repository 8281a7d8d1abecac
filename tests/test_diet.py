# tests/test_diet.py
from __future__ import annotations

import pytest

from core.diet import (
    DIET_RULES,
    DietRule,
    DietType,
    classify_diet,
    get_macro_percentages,
    macro_split,
)


def test_all_zero_is_balanced():
    assert classify_diet(0, 0, 0) == DietType.balanced
    assert get_macro_percentages(0, 0, 0) == {"protein": 0, "carbs": 0, "fat": 0}


@pytest.mark.parametrize(
    "p, c, f, expected",
    [
        # fat ~80 %, carbs ~5 %
        (30, 10, 70, DietType.keto),
        # carbs ~22 %
        (50, 40, 40, DietType.low_carb),
        # protein 40 %, carbs 40 %, fat 20 %
        (100, 100, 22.3, DietType.high_protein),
        # fat ~10 %, carbs ~69 %: low_fat is checked before high_carb
        (40, 130, 8, DietType.low_fat),
        # carbs 70 %, fat 20.3 %, protein 9.7 %
        (20, 145, 19, DietType.high_carb),
        # 25 / 45 / 30
        (75, 135, 40, DietType.balanced),
    ],
)
def test_classification(p, c, f, expected):
    assert classify_diet(p, c, f) == expected


def test_keto_beats_high_protein():
    # protein ~31 %, carbs ~2 %, fat ~67 %
    s = macro_split(100, 5, 95)
    assert s.protein > 30 and s.fat > 65 and s.carbs < 10
    assert classify_diet(100, 5, 95) == DietType.keto


def test_low_carb_beats_high_protein():
    # protein 50 %, carbs 20 %, fat 30 %
    s = macro_split(125, 50, 100 / 3)
    assert s.protein > 30 and s.carbs < 25
    assert classify_diet(125, 50, 100 / 3) == DietType.low_carb


def test_rule_table_order():
    assert [r.diet_type for r in DIET_RULES] == [
        DietType.keto,
        DietType.low_carb,
        DietType.high_protein,
        DietType.low_fat,
        DietType.high_carb,
    ]


def test_custom_rule_table():
    always = (DietRule(DietType.high_carb, lambda s: True),)
    assert classify_diet(30, 10, 70, rules=always) == DietType.high_carb
    assert classify_diet(30, 10, 70, rules=()) == DietType.balanced


def test_macro_percentages_round_independently():
    # 1/3 each by kcal -> 33 / 33 / 33
    pct = get_macro_percentages(9, 9, 4)
    assert pct == {"protein": 33, "carbs": 33, "fat": 33}
    assert sum(pct.values()) == 99


def test_macro_percentages_values():
    assert get_macro_percentages(75, 135, 40) == {"protein": 25, "carbs": 45, "fat": 30}


def test_diet_type_is_str_enum():
    assert DietType.low_carb == "low_carb"
