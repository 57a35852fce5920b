"""
Persona Templates and Consumption Profiles

Persona templates bulk-initialize a household's preference slots. Each
template lists, per butcher category, ordered keyword rules; the first rule
fills slot 1, the second slot 2, and so on. Keywords match product names
case-insensitively, in the order given.

Consumption profiles preset the family composition and protein target.
"""

PERSONA_TEMPLATES = {
    'family_budget': {
        'label': 'Family Budget (4p)',
        'description': 'Tuned for about $100/week. Large formats, stews.',
        'weekly_budget': 100.0,
        'rules': {
            'beef': [
                {'keywords': ['haché', 'ground'], 'weekly_frequency': 2},
                {'keywords': ['cube', 'ragoût', 'stew'], 'weekly_frequency': 1},
                {'keywords': ['palette', 'rôti'], 'weekly_frequency': 0.5},
            ],
            'poultry': [
                {'keywords': ['entier', 'whole'], 'weekly_frequency': 1},
                {'keywords': ['haut cuisse', 'thigh'], 'weekly_frequency': 2},
                {'keywords': ['pilon', 'drumstick'], 'weekly_frequency': 1},
            ],
            'pork': [
                {'keywords': ['longe', 'rôti'], 'weekly_frequency': 0.5},
                {'keywords': ['saucisse'], 'weekly_frequency': 1},
            ],
            'extra': [
                {'keywords': ['pâté'], 'weekly_frequency': 1},
            ],
        },
    },
    'shared_custody': {
        'label': 'Shared Custody',
        'description': 'Flexible. Kid-friendly dishes and quick meals.',
        'weekly_budget': 110.0,
        'rules': {
            'beef': [
                {'keywords': ['burger', 'haché'], 'weekly_frequency': 2},
                {'keywords': ['minute', 'tournedos'], 'weekly_frequency': 1},
            ],
            'poultry': [
                {'keywords': ['croquette', 'nugget'], 'weekly_frequency': 2},
                {'keywords': ['brochette', 'souvlaki'], 'weekly_frequency': 1},
                {'keywords': ['pané'], 'weekly_frequency': 1},
            ],
            'extra': [
                {'keywords': ['pâté'], 'weekly_frequency': 1},
                {'keywords': ['sauce'], 'weekly_frequency': 1},
                {'keywords': ['lasagne'], 'weekly_frequency': 1},
            ],
        },
    },
    'essentials': {
        'label': 'The 5 Essentials',
        'description': 'Five simple meals a week. Chicken, beef, pork.',
        'weekly_budget': 90.0,
        'rules': {
            'beef': [
                {'keywords': ['haché', 'ground'], 'weekly_frequency': 2},
            ],
            'poultry': [
                {'keywords': ['poitrine', 'breast'], 'weekly_frequency': 2},
            ],
            'pork': [
                {'keywords': ['côtelette', 'chop'], 'weekly_frequency': 1},
            ],
        },
    },
    'premium': {
        'label': 'Premium Gastronome',
        'description': 'Upgrade. Steaks, seafood, veal, duck.',
        'weekly_budget': 200.0,
        'rules': {
            'beef': [
                {'keywords': ['filet mignon'], 'weekly_frequency': 1},
                {'keywords': ['ribeye', 'faux-filet'], 'weekly_frequency': 1},
                {'keywords': ['bavette'], 'weekly_frequency': 0.5},
            ],
            'fish': [
                {'keywords': ['pétoncle'], 'weekly_frequency': 1},
                {'keywords': ['homard', 'crevette'], 'weekly_frequency': 0.5},
                {'keywords': ['saumon'], 'weekly_frequency': 1},
            ],
            'extra': [
                {'keywords': ['veau'], 'weekly_frequency': 0.5},
                {'keywords': ['canard'], 'weekly_frequency': 0.5},
            ],
        },
    },
    'condo_storage': {
        'label': 'Condo Storage',
        'description': 'Compact. Flat vacuum-packed formats.',
        'weekly_budget': 125.0,
        'rules': {
            'beef': [
                {'keywords': ['bavette'], 'weekly_frequency': 1},
                {'keywords': ['tournedos'], 'weekly_frequency': 1},
                {'keywords': ['steak'], 'weekly_frequency': 1},
            ],
            'poultry': [
                {'keywords': ['poitrine', 'breast'], 'weekly_frequency': 2},
                {'keywords': ['tournedos'], 'weekly_frequency': 1},
            ],
            'fish': [
                {'keywords': ['filet'], 'weekly_frequency': 2},
            ],
            'pork': [
                {'keywords': ['saucisse'], 'weekly_frequency': 1},
                {'keywords': ['bacon'], 'weekly_frequency': 0.5},
            ],
        },
    },
}

# Household presets (protein grams per supper, per person)
CONSUMPTION_PROFILES = {
    'single': {'label': 'Single person', 'adults': 1, 'teens': 0, 'children': 0, 'grams_per_person': 115},
    'couple': {'label': 'Couple', 'adults': 2, 'teens': 0, 'children': 0, 'grams_per_person': 230},
    'family_small': {'label': 'Family (2 children under 12)', 'adults': 2, 'teens': 0, 'children': 2, 'grams_per_person': 390},
    'family_teens': {'label': 'Family (2 teens)', 'adults': 2, 'teens': 2, 'children': 0, 'grams_per_person': 520},
}

# Cheap fillers used when premium lines must be swapped out to meet budget:
# (category, textures)
BUDGET_FILLERS = (
    ('Beef', ('ground',)),
    ('Poultry', ('piece', 'whole')),
)
