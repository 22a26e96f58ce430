"""Disease-based exclusion of recipes."""

import logging
from collections import Counter
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Protocol

from family_diet.domain.recipes import (
    ExcludedFoodRule,
    ExcludedFoodStats,
    ExclusionVerdict,
    RecipeForDiet,
)
from family_diet.services.text import normalize_text

_logger = logging.getLogger(__name__)

_NOT_EXCLUDED = ExclusionVerdict(excluded=False)


class ExcludedFoodRepository(Protocol):
    """Read interface for the excluded-food catalog."""

    def list_rules(self) -> list[ExcludedFoodRule]:
        """Return every excluded-food rule."""


def check_recipe_exclusion(
    recipe: RecipeForDiet, rules: Iterable[ExcludedFoodRule]
) -> ExclusionVerdict:
    """Return the verdict of the first rule that matches the recipe.

    Keyword rules also look at the title and description, but a recipe
    without ingredients has nothing to match and is never excluded.
    """
    if not recipe.ingredients:
        return _NOT_EXCLUDED
    ingredient_names = [normalize_text(item.name) for item in recipe.ingredients]
    keyword_text = " ".join(
        text
        for text in (normalize_text(recipe.title), normalize_text(recipe.description))
        if text
    )
    for rule in rules:
        term = rule.search_term
        if term is None:
            continue
        matched = any(term in name for name in ingredient_names)
        if not matched and rule.matches_keywords:
            matched = term in keyword_text
        if matched:
            return ExclusionVerdict(
                excluded=True,
                rule=rule,
                reason=rule.reason or f"{rule.excluded_food_name.strip()} 포함",
                severity=rule.severity,
            )
    return _NOT_EXCLUDED


def filter_recipes_by_excluded_foods(
    recipes: Sequence[RecipeForDiet], rules: Sequence[ExcludedFoodRule]
) -> list[RecipeForDiet]:
    """Return recipes that no active rule excludes.

    A rule is active when its food name is non-blank; any single active rule
    matching an ingredient name (case-insensitive substring) excludes a recipe.
    """
    active = [rule for rule in rules if rule.search_term is not None]
    if not active:
        return list(recipes)
    kept = [
        recipe
        for recipe in recipes
        if not check_recipe_exclusion(recipe, active).excluded
    ]
    _logger.debug(
        "Excluded-food filter: kept=%s excluded=%s rules=%s",
        len(kept),
        len(recipes) - len(kept),
        len(active),
    )
    return kept


def rules_for_diseases(
    rules: Iterable[ExcludedFoodRule], diseases: Iterable[str]
) -> list[ExcludedFoodRule]:
    """Return the union of rules registered for any of the diseases."""
    wanted = {code for code in diseases if code}
    if not wanted:
        return []
    return [rule for rule in rules if rule.disease in wanted]


def excluded_food_stats(rules: Iterable[ExcludedFoodRule]) -> ExcludedFoodStats:
    """Count rules per disease, type and severity."""
    by_disease: Counter[str] = Counter()
    by_type: Counter[str] = Counter()
    by_severity: Counter[str] = Counter()
    for rule in rules:
        by_disease[rule.disease] += 1
        by_type[rule.excluded_type] += 1
        by_severity[rule.severity] += 1
    return ExcludedFoodStats(
        by_disease=dict(by_disease),
        by_type=dict(by_type),
        by_severity=dict(by_severity),
    )


def search_excluded_foods(
    rules: Iterable[ExcludedFoodRule],
    query: str | None = None,
    disease: str | None = None,
    excluded_type: str | None = None,
) -> list[ExcludedFoodRule]:
    """Search rules by name substring, disease and type, ordered by disease."""
    needle = normalize_text(query)
    matches = [
        rule
        for rule in rules
        if (not needle or needle in (rule.search_term or ""))
        and (not disease or rule.disease == disease)
        and (not excluded_type or rule.excluded_type == excluded_type)
    ]
    return sorted(matches, key=lambda rule: rule.disease)


@dataclass
class ExclusionService:
    """Application service applying the excluded-food catalog."""

    repository: ExcludedFoodRepository
    debug: bool = False

    def rules_for(self, diseases: Iterable[str]) -> list[ExcludedFoodRule]:
        """Return catalog rules for the given disease codes."""
        return rules_for_diseases(self.repository.list_rules(), diseases)

    def verdicts_for_diseases(
        self,
        recipes: Sequence[RecipeForDiet],
        diseases: Iterable[str],
        extra_rules: Sequence[ExcludedFoodRule] = (),
    ) -> list[tuple[RecipeForDiet, ExclusionVerdict]]:
        """Pair each recipe with its verdict, in input order."""
        rules = [*self.rules_for(diseases), *extra_rules]
        verdicts = [
            (recipe, check_recipe_exclusion(recipe, rules)) for recipe in recipes
        ]
        if self.debug:
            _logger.info(
                "Recipe verdicts: recipes=%s rules=%s excluded=%s",
                len(recipes),
                len(rules),
                sum(1 for _, verdict in verdicts if verdict.excluded),
            )
        return verdicts

    def filter_for_diseases(
        self,
        recipes: Sequence[RecipeForDiet],
        diseases: Iterable[str],
        extra_rules: Sequence[ExcludedFoodRule] = (),
    ) -> list[RecipeForDiet]:
        """Filter recipes by catalog rules for diseases plus any extra rules."""
        rules = [*self.rules_for(diseases), *extra_rules]
        kept = filter_recipes_by_excluded_foods(recipes, rules)
        if self.debug:
            _logger.info(
                "Recipe filter: recipes=%s rules=%s kept=%s",
                len(recipes),
                len(rules),
                len(kept),
            )
        return kept

    def search(
        self,
        query: str | None = None,
        disease: str | None = None,
        excluded_type: str | None = None,
    ) -> list[ExcludedFoodRule]:
        """Search the catalog for the admin view."""
        return search_excluded_foods(
            self.repository.list_rules(), query, disease, excluded_type
        )

    def stats(self) -> ExcludedFoodStats:
        """Return catalog statistics."""
        return excluded_food_stats(self.repository.list_rules())
