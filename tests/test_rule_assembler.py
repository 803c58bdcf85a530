import pytest
from pydantic import ValidationError

from preset_kit.models.rule import (
    DEGRADATION_THRESHOLD_A,
    DEGRADATION_THRESHOLD_B,
    AssemblyOptions,
    RuleCondition,
    RuleDefinition,
)
from preset_kit.rules.assembler import RuleAssembler, assemble_rules, get_minimal_rules
from preset_kit.rules.catalog import DEFAULT_CATALOG, RuleCatalog
from preset_kit.rules.code_rules import CODE_RULES, assemble_code_rules


def rule(key, weight, condition=RuleCondition.NONE, enabled=True):
    return RuleDefinition(
        key=key,
        name=key.title(),
        content=f"{key} content",
        weight=weight,
        enabled=enabled,
        condition=condition,
    )


@pytest.fixture
def gated_catalog():
    return RuleCatalog(
        [
            rule("base", 5),
            rule("late", 9, condition=RuleCondition.DEGRADATION_65),
        ]
    )


def test_default_catalog_is_non_empty_with_unique_keys():
    keys = DEFAULT_CATALOG.keys()
    assert keys
    assert len(keys) == len(set(keys))
    assert all(r.weight > 0 for r in DEFAULT_CATALOG.list_all())


def test_catalog_rejects_duplicate_keys():
    with pytest.raises(ValueError, match="Duplicate rule key"):
        RuleCatalog([rule("a", 1), rule("a", 2)])


def test_catalog_is_immutable():
    catalog = RuleCatalog([rule("a", 1)])
    assert isinstance(catalog.list_all(), tuple)
    with pytest.raises(AttributeError):
        catalog.list_all()[0].weight = 10


def test_no_options_equals_full_allow_list():
    assert assemble_rules() == assemble_rules(AssemblyOptions(enabled_rules=list(DEFAULT_CATALOG.keys())))


def test_end_to_end_gate_below_threshold(gated_catalog):
    result = RuleAssembler(gated_catalog).assemble(AssemblyOptions(degradation=40))
    assert result == "## Base\n\nbase content"


@pytest.mark.parametrize(
    "condition, threshold",
    [
        (RuleCondition.DEGRADATION_31, DEGRADATION_THRESHOLD_A),
        (RuleCondition.DEGRADATION_65, DEGRADATION_THRESHOLD_B),
    ],
)
def test_gated_rule_needs_state_at_or_above_threshold(condition, threshold):
    assembler = RuleAssembler(RuleCatalog([rule("gated", 3, condition=condition)]))
    assert assembler.assemble(AssemblyOptions()) == ""
    assert assembler.assemble(AssemblyOptions(degradation=threshold - 1)) == ""
    assert assembler.assemble(AssemblyOptions(degradation=threshold - 0.5)) == ""
    assert assembler.assemble(AssemblyOptions(degradation=threshold)) == "## Gated\n\ngated content"
    assert assembler.assemble(AssemblyOptions(degradation=100)) == "## Gated\n\ngated content"


def test_condition_thresholds_are_named_constants():
    assert RuleCondition.NONE.threshold is None
    assert RuleCondition.DEGRADATION_31.threshold == 31
    assert RuleCondition.DEGRADATION_65.threshold == 65
    assert RuleCondition.NONE.is_met(None)


def test_sorted_by_weight_with_stable_ties():
    catalog = RuleCatalog([rule("first", 3), rule("heavy", 7), rule("second", 3)])
    selected = RuleAssembler(catalog).select(AssemblyOptions())
    assert [r.key for r in selected] == ["heavy", "first", "second"]


def test_sections_are_joined_with_separator_line():
    catalog = RuleCatalog([rule("a", 2), rule("b", 1)])
    assert RuleAssembler(catalog).assemble() == "## A\n\na content\n\n---\n\n## B\n\nb content"


def test_allow_list_and_enabled_flag_both_filter():
    catalog = RuleCatalog([rule("on", 2), rule("off", 3, enabled=False), rule("other", 1)])
    assembler = RuleAssembler(catalog)
    assert [r.key for r in assembler.select(AssemblyOptions(enabled_rules=["off", "on"]))] == ["on"]
    assert assembler.assemble(AssemblyOptions(enabled_rules=[])) == ""


def test_custom_content_overrides_static_content():
    catalog = RuleCatalog([rule("a", 2), rule("b", 1)])
    result = RuleAssembler(catalog).assemble(
        AssemblyOptions(custom_rules={"a": "custom a", "b": "", "missing": "ignored"})
    )
    assert result == "## A\n\ncustom a\n\n---\n\n## B\n\nb content"


def test_options_accept_camel_case_aliases():
    options = AssemblyOptions(**{"enabledRules": ["time"], "customRules": {"time": "x"}, "degradation": 10})
    assert options.enabled_rules == ["time"]
    assert options.custom_rules == {"time": "x"}


def test_invalid_degradation_is_rejected_before_assembly():
    with pytest.raises(ValidationError):
        AssemblyOptions(degradation="very high")


def test_default_catalog_gates():
    assert "## Distant Attitude" not in get_minimal_rules()
    mid = get_minimal_rules(40)
    assert "## Distant Attitude" in mid
    assert "## Estrangement" not in mid
    high = get_minimal_rules(70)
    assert "## Estrangement" in high
    assert high.index("## Character Development") < high.index("## Time System")


def test_minimal_rules_match_assembly_without_overrides():
    assert get_minimal_rules(50) == assemble_rules(AssemblyOptions(degradation=50))


def test_code_rules_are_fixed_and_ordered():
    text = assemble_code_rules()
    assert text == "\n\n".join(CODE_RULES)
    assert text.startswith("**LOCATION & MOVEMENT**")
    assert text.rstrip().endswith("}")
    assert "**RESPONSE FORMAT**" in text


def test_empty_catalog_assembles_to_empty_text():
    assembler = RuleAssembler(RuleCatalog([]))
    assert assembler.select(AssemblyOptions()) == []
    assert assembler.assemble(AssemblyOptions(degradation=100)) == ""
