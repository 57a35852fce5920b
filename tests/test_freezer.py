"""
Freezer Timeline Tests
======================

365-day volume simulation and overflow offload to the pickup list.
"""

import pytest

from conftest import make_plan, make_product
from models.planning import HouseholdProfile
from services.freezer import delivery_volume, plan_volume, required_space_for_family, simulate_freezer
from utils.errors import PlanningInputError


@pytest.fixture
def heavy():
    """5 kg box: about 0.44 cu ft."""
    return make_product('heavy', weight=5000)


@pytest.fixture
def light():
    """1 kg box: about 0.088 cu ft."""
    return make_product('light', weight=1000, category='Poultry')


class TestVolumes:

    def test_box_volume(self, heavy):
        assert heavy.package_volume_cu_ft == pytest.approx(5 * 2.20462 / 25)

    def test_plan_volume(self, heavy, light):
        plan = make_plan((heavy, {1: 2}), (light, {2: 3}))
        assert plan_volume(plan) == pytest.approx(2 * heavy.package_volume_cu_ft + 3 * light.package_volume_cu_ft)

    def test_required_space_for_family(self):
        profile = HouseholdProfile(adults=2, teens=0, children=2)
        assert required_space_for_family(profile) == pytest.approx(7.5)


class TestSimulateFreezer:

    def test_overflow_moves_heaviest_boxes_to_pickup(self, heavy, light):
        """A ~9.08 cu ft first delivery into 8 cu ft overflows the 8.8 cu ft tolerance."""
        plan = make_plan((heavy, {1: 19}), (light, {1: 8}))
        incoming = delivery_volume(plan, 1)
        assert incoming > 8 * 1.1

        result = simulate_freezer(plan, 8)

        assert result.pickup_volume >= incoming - 8 * 1.1
        assert [p.id for p in result.pickup_list] == ['heavy', 'heavy', 'heavy']
        assert result.offload == {'heavy': {1: 3}}
        assert result.plan.get_line('heavy').quantities[1] == 16
        assert result.plan.get_line('light').quantities[1] == 8
        assert result.timeline[0].is_delivery_day
        assert result.timeline[0].volume == pytest.approx(incoming - 3 * heavy.package_volume_cu_ft)
        assert result.max_volume == pytest.approx(result.timeline[0].volume)

    def test_volume_is_conserved(self, heavy, light):
        plan = make_plan((heavy, {1: 19, 2: 6, 3: 12}), (light, {1: 8, 2: 20, 4: 5}))
        result = simulate_freezer(plan, 4)

        assert result.pickup_list
        assert plan_volume(result.plan) + result.pickup_volume == pytest.approx(plan_volume(plan))

    def test_input_plan_untouched(self, heavy):
        plan = make_plan((heavy, {1: 30}))
        simulate_freezer(plan, 2)
        assert plan.get_line('heavy').quantities[1] == 30

    def test_timeline_has_every_day(self, heavy):
        result = simulate_freezer(make_plan((heavy, {1: 1})), 5)
        assert len(result.timeline) == 365
        assert [point.day for point in result.timeline] == list(range(1, 366))

    def test_deliveries_follow_restock_threshold(self, light):
        plan = make_plan((light, {1: 11, 2: 11, 3: 11, 4: 11}))
        result = simulate_freezer(plan, 2)

        arrivals = [point for point in result.timeline if point.is_delivery_day]
        assert [point.delivery_index for point in arrivals] == [1, 2, 3, 4]
        assert arrivals[0].day == 1
        assert all(a.day < b.day for a, b in zip(arrivals, arrivals[1:]))
        assert result.pickup_list == []

    def test_empty_first_delivery_skipped(self, light):
        result = simulate_freezer(make_plan((light, {2: 3})), 10)
        arrivals = [point for point in result.timeline if point.is_delivery_day]
        assert [(p.day, p.delivery_index) for p in arrivals] == [(1, 2)]

    def test_empty_plan(self):
        result = simulate_freezer(make_plan(), 5)
        assert len(result.timeline) == 365
        assert not any(point.is_delivery_day for point in result.timeline)
        assert result.max_volume == 0
        assert result.pickup_list == []

    def test_negative_capacity_rejected(self, heavy):
        with pytest.raises(PlanningInputError):
            simulate_freezer(make_plan((heavy, {1: 1})), -1)

    def test_to_dict(self, heavy):
        data = simulate_freezer(make_plan((heavy, {1: 30})), 2).to_dict()
        assert len(data['timeline']) == 365
        assert data['offload']['heavy']['1'] == len(data['pickup_list'])
