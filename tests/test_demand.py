"""
Demand Calculation Tests
========================

Annual weight and cost targets derived from household composition and
weekly slot frequencies.
"""

import pytest

from models.planning import HouseholdProfile
from services.demand import calculate_demand, coverage_ratio, portions_per_meal
from utils.errors import PlanningInputError


class TestHouseholdRecord:

    def test_round_trip_keeps_protein_days(self):
        days = (True, False, True, False, True, False, True)
        profile = HouseholdProfile.from_dict(HouseholdProfile(protein_days=days).to_dict())
        assert profile.protein_days == days

    @pytest.mark.parametrize('protein_days', [5, 'weekdays', [True] * 5, None])
    def test_malformed_protein_days_reset_to_default(self, protein_days):
        profile = HouseholdProfile.from_dict({'protein_days': protein_days})
        assert profile.protein_days == HouseholdProfile().protein_days


class TestPortions:

    def test_members_are_weighted(self):
        profile = HouseholdProfile(adults=2, teens=2, children=2)
        assert portions_per_meal(profile) == pytest.approx(2 + 1.5 + 1.0)

    def test_factor_overrides(self):
        profile = HouseholdProfile(adults=1, teens=2, children=2)
        assert portions_per_meal(profile, teen_factor=0.5, child_factor=0.25) == pytest.approx(2.5)

    def test_negative_members_clamped(self):
        profile = HouseholdProfile(adults=-2, teens=-1, children=0)
        assert portions_per_meal(profile) == 0

    def test_coverage_ratio(self):
        assert coverage_ratio(HouseholdProfile(restaurant_frequency=0)) == 1.0
        assert coverage_ratio(HouseholdProfile(restaurant_frequency=104)) == pytest.approx(261 / 365)
        assert coverage_ratio(HouseholdProfile(restaurant_frequency=400)) == 0.0


class TestCalculateDemand:

    def test_single_slot_scenario(self, couple_profile, small_catalog):
        """2 adults x 150 g x 52 meals = 15.6 kg of a 10$/kg product."""
        result = calculate_demand(couple_profile, small_catalog)

        slot = result.slots['Custom|boeuf_slot_1']
        assert slot.annual_meals == pytest.approx(52)
        assert slot.annual_kg == pytest.approx(15.6)
        assert slot.annual_cost == pytest.approx(156.0)
        assert result.total_kg == pytest.approx(15.6)
        assert result.total_meals == pytest.approx(52)
        assert result.coverage_percent == pytest.approx(100.0)

    def test_restaurant_days_reduce_demand(self, couple_profile, small_catalog):
        profile = couple_profile.copy(restaurant_frequency=104)
        result = calculate_demand(profile, small_catalog)

        assert result.total_meals == pytest.approx(37.18, abs=0.01)
        assert result.total_kg == pytest.approx(15.6 * 261 / 365)
        assert result.coverage_percent == pytest.approx(71.5, abs=0.1)

    def test_zero_family_is_not_an_error(self, couple_profile, small_catalog):
        profile = couple_profile.copy(adults=0)
        result = calculate_demand(profile, small_catalog)
        assert result.total_kg == 0
        assert result.total_cost == 0

    def test_missing_product_skipped(self, couple_profile, small_catalog):
        profile = couple_profile.copy(
            slot_frequencies={'Custom|boeuf_slot_1': 1.0, 'Custom|poulet_slot_1': 2.0},
            slot_selections={'boeuf_slot_1': 'x', 'poulet_slot_1': 'deleted'},
        )
        result = calculate_demand(profile, small_catalog)
        assert list(result.slots) == ['Custom|boeuf_slot_1']

    def test_slot_without_selection_contributes_nothing(self, small_catalog):
        profile = HouseholdProfile(slot_frequencies={'Custom|boeuf_slot_1': 2.0})
        result = calculate_demand(profile, small_catalog)
        assert result.slots == {}
        assert result.total_cost == 0

    def test_non_custom_keys_ignored(self, couple_profile, small_catalog):
        profile = couple_profile.copy(slot_frequencies={'Custom|boeuf_slot_1': 1.0, 'Beef': 3.0})
        result = calculate_demand(profile, small_catalog)
        assert list(result.slots) == ['Custom|boeuf_slot_1']

    def test_frequency_increase_never_lowers_totals(self, couple_profile, small_catalog):
        previous_cost = previous_meals = -1
        for frequency in (0, 0.25, 0.5, 1.0, 1.75, 2.0, 3.5):
            profile = couple_profile.copy(slot_frequencies={'Custom|boeuf_slot_1': frequency,
                                                            'Custom|poulet_slot_1': 1.0},
                                          slot_selections={'boeuf_slot_1': 'x', 'poulet_slot_1': 'chicken'})
            result = calculate_demand(profile, small_catalog)
            assert result.total_cost >= previous_cost
            assert result.total_meals >= previous_meals
            previous_cost, previous_meals = result.total_cost, result.total_meals

    def test_to_dict_shape(self, couple_profile, small_catalog):
        data = calculate_demand(couple_profile, small_catalog).to_dict()
        assert data['per_slot_kg'] == {'Custom|boeuf_slot_1': 15.6}
        assert data['per_slot_cost'] == {'Custom|boeuf_slot_1': 156.0}
        assert data['total_cost'] == 156.0

    def test_missing_catalog_rejected(self, couple_profile):
        with pytest.raises(PlanningInputError):
            calculate_demand(couple_profile, None)
