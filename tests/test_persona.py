"""
Persona Tests
=============

Destructive-overwrite guard, persona slot filling and consumption presets.
"""

import pytest

from conftest import make_product
from constants import PERSONA_TEMPLATES
from models.planning import Catalog, HouseholdProfile
from services.persona import (
    apply_consumption_profile, apply_persona, candidates_for, has_existing_customizations, match_rule,
)
from utils.errors import PlanningInputError


class TestCustomizationGuard:

    def test_fresh_profile(self):
        assert has_existing_customizations(HouseholdProfile()) is False

    def test_frequency_without_selection(self):
        profile = HouseholdProfile(slot_frequencies={'Custom|boeuf_slot_1': 1.0})
        assert has_existing_customizations(profile) is False

    def test_selection_without_frequency(self):
        profile = HouseholdProfile(slot_frequencies={'Custom|boeuf_slot_1': 0},
                                   slot_selections={'boeuf_slot_1': 'x'})
        assert has_existing_customizations(profile) is False

    def test_frequency_and_selection(self, couple_profile):
        assert has_existing_customizations(couple_profile) is True


class TestMatchRule:

    @pytest.fixture
    def candidates(self):
        return [
            make_product('a', name='Steak Minute'),
            make_product('b', name='Bœuf haché maigre'),
            make_product('c', name='Bœuf HACHÉ extra maigre'),
        ]

    def test_keywords_checked_in_order(self, candidates):
        rule = {'keywords': ['minute', 'haché'], 'weekly_frequency': 1}
        assert match_rule(rule, candidates, set()).id == 'a'

    def test_case_insensitive_and_skips_used(self, candidates):
        rule = {'keywords': ['haché'], 'weekly_frequency': 1}
        assert match_rule(rule, candidates, {'b'}).id == 'c'

    def test_falls_back_to_first_unused(self, candidates):
        rule = {'keywords': ['tomahawk'], 'weekly_frequency': 1}
        assert match_rule(rule, candidates, {'a'}).id == 'b'

    def test_nothing_left(self, candidates):
        assert match_rule({'keywords': ['x']}, candidates, {'a', 'b', 'c'}) is None


class TestCandidates:

    def test_extra_draws_from_ready_and_game(self, seed_catalog):
        categories = {p.category for p in candidates_for('extra', seed_catalog)}
        assert categories == {'Ready-to-eat', 'Game'}

    def test_prefer_staples_is_stable(self, seed_catalog):
        plain = candidates_for('beef', seed_catalog)
        staples_first = candidates_for('beef', seed_catalog, prefer_staples=True)

        kinds = [p.consumption_type == 'staple' for p in staples_first]
        assert kinds == sorted(kinds, reverse=True)
        assert [p for p in staples_first if p.consumption_type == 'staple'] == \
            [p for p in plain if p.consumption_type == 'staple']

    def test_unavailable_excluded(self):
        catalog = Catalog([make_product('x', is_available=False), make_product('y')])
        assert [p.id for p in candidates_for('beef', catalog)] == ['y']


class TestApplyPersona:

    def test_essentials(self, seed_catalog):
        profile = apply_persona('essentials', seed_catalog, HouseholdProfile())

        assert profile.slot_selections['boeuf_slot_1'] == 'b_821397'
        assert profile.slot_selections['poulet_slot_1'] == 'p_QC10114'
        assert profile.slot_selections['porc_slot_1'] == 'po_cotelette'
        assert profile.selected_persona_id == 'essentials'
        assert profile.weekly_budget == PERSONA_TEMPLATES['essentials']['weekly_budget']

    def test_premium_fills_fish_and_extra(self, seed_catalog):
        profile = apply_persona('premium', seed_catalog, HouseholdProfile())

        assert profile.slot_selections['boeuf_slot_1'] == 'b_821421'
        assert profile.slot_selections['poisson_slot_1'] == 'f_petoncle'
        assert profile.slot_selections['poisson_slot_2'] == 'f_tigre'
        assert profile.slot_selections['extra_slot_1'] == 'g_veau'
        assert profile.slot_selections['extra_slot_2'] == 'g_canard'

    def test_frequencies_scaled_into_bounds(self, seed_catalog):
        profile = apply_persona('family_budget', seed_catalog, HouseholdProfile(adults=2, children=2))
        active = [f for f in profile.slot_frequencies.values() if f > 0]

        assert active
        assert all(0.25 <= f <= 2.0 for f in active)

    def test_products_never_reused(self, seed_catalog):
        for persona_id in PERSONA_TEMPLATES:
            profile = apply_persona(persona_id, seed_catalog, HouseholdProfile())
            active = [key.split('|', 1)[1] for key, f in profile.slot_frequencies.items() if f > 0]
            chosen = [profile.slot_selections[name] for name in active]
            assert len(chosen) == len(set(chosen))

    def test_overwrites_existing_slots(self, seed_catalog, couple_profile):
        profile = couple_profile.copy(slot_frequencies={'Custom|boeuf_slot_1': 1.0, 'Custom|boeuf_slot_4': 2.0},
                                      slot_selections={'boeuf_slot_1': 'x', 'boeuf_slot_4': 'b_burger'})
        updated = apply_persona('essentials', seed_catalog, profile)

        assert updated.slot_frequencies['Custom|boeuf_slot_4'] == 0
        assert updated.slot_selections['boeuf_slot_4'] == 'b_burger'
        assert has_existing_customizations(updated)
        assert profile.slot_frequencies['Custom|boeuf_slot_4'] == 2.0

    def test_unknown_persona(self, seed_catalog):
        with pytest.raises(PlanningInputError):
            apply_persona('carnivore', seed_catalog, HouseholdProfile())


class TestConsumptionProfiles:

    def test_family_teens(self):
        profile = apply_consumption_profile('family_teens', HouseholdProfile(restaurant_frequency=20))
        assert (profile.adults, profile.teens, profile.children) == (2, 2, 0)
        assert profile.grams_per_person == 520
        assert profile.restaurant_frequency == 20

    def test_unknown_profile(self):
        with pytest.raises(PlanningInputError):
            apply_consumption_profile('army', HouseholdProfile())
