"""
API Tests
=========

Flask JSON endpoints on an in-memory SQLite database seeded with the
default catalog.
"""


def set_household(client, **fields):
    response = client.put('/api/household', json=fields)
    assert response.status_code == 200
    return response.get_json()


class TestHome:

    def test_index(self, client):
        data = client.get('/').get_json()
        assert data['products'] > 30
        assert data['cart_lines'] == 0

    def test_products_by_category(self, client):
        products = client.get('/api/products?category=Game').get_json()
        assert {p['id'] for p in products} == {'g_veau', 'g_canard'}

    def test_import(self, client):
        response = client.post('/api/products/import', json={'products': [
            {'id': 'new_1', 'name': 'Cuisses de dinde', 'category': 'Volaille', 'price': 40, 'package_weight_grams': 2000},
            {'id': 'g_veau', 'name': 'Escalopes de veau', 'category': 'Game', 'price': 140, 'package_weight_grams': 2000},
        ]})
        assert response.get_json() == {'created': 1, 'updated': 1}
        poultry = client.get('/api/products?category=Poultry').get_json()
        assert 'new_1' in {p['id'] for p in poultry}

    def test_import_rejects_garbage(self, client):
        response = client.post('/api/products/import', json={'products': 'nope'})
        assert response.status_code == 400
        assert 'error' in response.get_json()


class TestHousehold:

    def test_defaults(self, client):
        data = client.get('/api/household').get_json()
        assert data['adults'] == 2
        assert data['weekly_budget'] == 125.0
        assert data['required_freezer_space'] == 5.0

    def test_update_clamps_numbers(self, client):
        data = set_household(client, adults='3', children=-2, meals_per_week=12)
        assert data['adults'] == 3.0
        assert data['children'] == 0
        assert data['meals_per_week'] == 7

    def test_protein_days_must_be_seven_flags(self, client):
        for days in (5, [True] * 5):
            response = client.put('/api/household', json={'protein_days': days})
            assert response.status_code == 400
            assert 'error' in response.get_json()

        data = set_household(client, protein_days=[True] * 7)
        assert data['protein_days'] == [True] * 7

    def test_slot_maps_must_be_objects(self, client):
        response = client.put('/api/household', json={'slot_frequencies': [1, 2]})
        assert response.status_code == 400

    def test_freezer(self, client):
        data = client.put('/api/freezer', json={'chest_capacity': 5}).get_json()
        assert data['usable_volume'] == round(3.5 * 0.75 + 5 * 0.9, 4)

    def test_negative_freezer_rejected(self, client):
        response = client.put('/api/freezer', json={'chest_capacity': -1})
        assert response.status_code == 400


class TestPersonas:

    def test_apply_on_fresh_household(self, client):
        response = client.post('/api/personas/essentials/apply', json={})
        assert response.status_code == 200
        assert response.get_json()['selected_persona_id'] == 'essentials'
        assert client.get('/api/household/customizations').get_json() == {'has_existing_customizations': True}

    def test_confirmation_required_over_customizations(self, client):
        client.post('/api/personas/essentials/apply', json={})

        response = client.post('/api/personas/premium/apply', json={})
        assert response.status_code == 409
        assert response.get_json()['requires_confirmation'] is True

        response = client.post('/api/personas/premium/apply', json={'confirm': True})
        assert response.status_code == 200
        assert response.get_json()['selected_persona_id'] == 'premium'

    def test_unknown_persona(self, client):
        assert client.post('/api/personas/nope/apply', json={}).status_code == 400

    def test_consumption_profile(self, client):
        data = client.post('/api/profiles/couple/apply').get_json()
        assert data['grams_per_person'] == 230
        assert client.post('/api/profiles/nope/apply').status_code == 400


class TestPlanning:

    def test_demand_and_plan(self, client):
        set_household(client, slot_frequencies={'Custom|boeuf_slot_1': 1.0},
                      slot_selections={'boeuf_slot_1': 'b_burger'})

        demand = client.get('/api/demand').get_json()
        assert demand['per_slot_kg'] == {'Custom|boeuf_slot_1': 15.6}

        plan = client.post('/api/plan', json={}).get_json()
        # 15.6 kg of 2.72 kg boxes -> 5 boxes at 72$
        assert plan['cart'] == [{'product_id': 'b_burger', 'quantities': {'1': 2, '2': 1, '3': 1, '4': 1},
                                 'source': 'optimized'}]
        assert plan['total_cost'] == 360.0
        assert len(plan['freezer']['timeline']) == 365

    def test_budget_scale(self, client):
        set_household(client, slot_frequencies={'Custom|boeuf_slot_1': 1.0},
                      slot_selections={'boeuf_slot_1': 'b_burger'})
        data = client.post('/api/budget/scale', json={'weekly_budget': 1000}).get_json()
        assert data['household']['slot_frequencies']['Custom|boeuf_slot_1'] == 2.0
        assert data['household']['weekly_budget'] == 1000

    def test_manual_lines_survive_rebuild(self, client):
        response = client.post('/api/cart/update', json={'product_id': 'f_aiglefin', 'delivery_index': 3, 'delta': 2})
        assert response.status_code == 200
        client.post('/api/plan', json={})

        cart = client.get('/api/cart').get_json()['cart']
        assert cart == [{'product_id': 'f_aiglefin', 'quantities': {'1': 0, '2': 0, '3': 2, '4': 0}, 'source': 'manual'}]

    def test_cart_delete(self, client):
        client.post('/api/cart/update', json={'product_id': 'f_aiglefin', 'delivery_index': 1, 'delta': 2})
        client.post('/api/cart/update', json={'product_id': 'b_burger', 'delivery_index': 2, 'delta': 1})

        data = client.post('/api/cart/delete/f_aiglefin').get_json()
        assert [line['product_id'] for line in data['cart']] == ['b_burger']
        assert client.get('/api/cart').get_json()['cart'] == data['cart']

    def test_cart_delete_unknown_line(self, client):
        assert client.post('/api/cart/delete/f_aiglefin').status_code == 404

    def test_cart_update_errors(self, client):
        assert client.post('/api/cart/update', json={'product_id': 'nope', 'delivery_index': 1}).status_code == 404
        response = client.post('/api/cart/update', json={'product_id': 'b_burger', 'delivery_index': 9})
        assert response.status_code == 400

    def test_overflow_goes_to_pickup(self, client):
        client.put('/api/freezer', json={'fridge_capacity': 1, 'chest_capacity': 0})
        # 10 boxes of 4.54 kg take about 4 cu ft against 0.75 usable
        client.post('/api/cart/update', json={'product_id': 'b_821397', 'delivery_index': 1, 'delta': 10})
        plan = client.post('/api/plan', json={}).get_json()

        pickup = client.get('/api/pickup').get_json()
        assert pickup
        assert all(item['delivery_index'] == 1 for item in pickup)
        assert plan['cart'][0]['quantities']['1'] == 10 - len(pickup)


class TestCalendar:

    def test_empty_cart_calendar(self, client):
        calendar = client.get('/api/calendar').get_json()
        assert len(calendar) == 365
        assert all(day['is_free_day'] for day in calendar)

    def test_calendar_is_stable_and_swappable(self, client):
        client.post('/api/cart/update', json={'product_id': 'p_QC10608', 'delivery_index': 1, 'delta': 4})
        first = client.get('/api/calendar').get_json()
        assert first == client.get('/api/calendar').get_json()
        assert first[0]['is_delivery_day'] and first[0]['product_id'] == 'p_QC10608'

        swapped = client.post('/api/calendar/swap', json={'index_a': 0, 'index_b': 5}).get_json()
        assert swapped[5]['product_id'] == 'p_QC10608' and swapped[5]['locked']
        assert swapped[0]['product_id'] is None and swapped[0]['locked']

        # cart change regenerates but keeps pinned days
        client.post('/api/cart/update', json={'product_id': 'p_QC10608', 'delivery_index': 2, 'delta': 1})
        regenerated = client.get('/api/calendar').get_json()
        assert regenerated[5]['locked'] and regenerated[5]['product_id'] == 'p_QC10608'

    def test_swap_out_of_range(self, client):
        client.get('/api/calendar')
        response = client.post('/api/calendar/swap', json={'index_a': 0, 'index_b': 400})
        assert response.status_code == 400
