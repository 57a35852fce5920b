"""
Seed Catalog

Default butcher catalog loaded into an empty database. Weights are the total
packaged weight of one purchasable box, in grams.
"""

SEED_CATALOG = [
    # Beef
    {'id': 'b_821397', 'sku': '821397', 'name': 'Bœuf haché extra maigre', 'price': 89.90, 'category': 'Beef', 'package_weight_grams': 4540, 'consumption_type': 'staple', 'texture': 'ground'},
    {'id': 'b_1534S', 'sku': '1534-S', 'name': 'Bœuf Haché Maigre', 'price': 83.00, 'category': 'Beef', 'package_weight_grams': 4540, 'consumption_type': 'staple', 'texture': 'ground'},
    {'id': 'b_811625', 'sku': '811625', 'name': 'Steak Minute AAA', 'price': 150.90, 'category': 'Beef', 'package_weight_grams': 2640, 'consumption_type': 'quick', 'texture': 'steak'},
    {'id': 'b_821343', 'sku': '821343', 'name': 'Cubes de boeuf à ragoût', 'price': 146.70, 'category': 'Beef', 'package_weight_grams': 3632, 'consumption_type': 'staple', 'texture': 'cube'},
    {'id': 'b_811930', 'sku': '811930', 'name': 'Tournedos de boeuf', 'price': 186.90, 'category': 'Beef', 'package_weight_grams': 2640, 'consumption_type': 'quick', 'texture': 'steak'},
    {'id': 'b_821416', 'sku': '821416', 'name': 'Bavette de boeuf marinée', 'price': 274.70, 'category': 'Beef', 'package_weight_grams': 2688, 'consumption_type': 'quick', 'texture': 'steak', 'is_premium': True},
    {'id': 'b_821421', 'sku': '821421', 'name': 'Filet mignon AAA+ 6 oz', 'price': 357.90, 'category': 'Beef', 'package_weight_grams': 2040, 'consumption_type': 'quick', 'texture': 'steak', 'is_premium': True},
    {'id': 'b_ribeye', 'sku': '821888', 'name': 'Faux-Filet (Ribeye) AAA', 'price': 310.00, 'category': 'Beef', 'package_weight_grams': 3400, 'consumption_type': 'quick', 'texture': 'steak', 'is_premium': True},
    {'id': 'b_821425', 'sku': '821425', 'name': "Roti d'Épaule de Boeuf", 'price': 120.80, 'category': 'Beef', 'package_weight_grams': 3000, 'consumption_type': 'roast', 'texture': 'roast'},
    {'id': 'b_roti_palette', 'sku': 'B050', 'name': 'Rôti de palette désossé', 'price': 98.00, 'category': 'Beef', 'package_weight_grams': 3200, 'consumption_type': 'roast', 'texture': 'roast'},
    {'id': 'b_boulettes', 'sku': 'B052', 'name': 'Boulettes de bœuf italiennes', 'price': 65.00, 'category': 'Beef', 'package_weight_grams': 2000, 'consumption_type': 'quick', 'texture': 'prepared'},
    {'id': 'b_burger', 'sku': 'B055', 'name': 'Burger de bœuf pur', 'price': 72.00, 'category': 'Beef', 'package_weight_grams': 2720, 'consumption_type': 'quick', 'texture': 'ground'},

    # Poultry
    {'id': 'p_QC10608', 'sku': 'QC10608', 'name': 'Haut Cuisse poulet désossé', 'price': 127.00, 'category': 'Poultry', 'package_weight_grams': 3600, 'consumption_type': 'staple', 'texture': 'piece'},
    {'id': 'p_QC10114', 'sku': 'QC10114', 'name': 'Poitrines poulet désossées', 'price': 109.00, 'category': 'Poultry', 'package_weight_grams': 3200, 'consumption_type': 'staple', 'texture': 'breast'},
    {'id': 'p_hache', 'sku': 'QC10999', 'name': 'Poulet Haché Maigre', 'price': 95.00, 'category': 'Poultry', 'package_weight_grams': 4540, 'consumption_type': 'staple', 'texture': 'ground'},
    {'id': 'p_QC11009', 'sku': 'QC11009', 'name': 'Poulet entier 1,8 kg', 'price': 17.40, 'category': 'Poultry', 'package_weight_grams': 1800, 'consumption_type': 'roast', 'texture': 'whole'},
    {'id': 'p_pilon', 'sku': 'QC10700', 'name': 'Pilons de poulet', 'price': 48.00, 'category': 'Poultry', 'package_weight_grams': 2000, 'consumption_type': 'staple', 'texture': 'piece'},
    {'id': 'p_811425', 'sku': '811425', 'name': 'Brochettes poulet souvlaki', 'price': 133.70, 'category': 'Poultry', 'package_weight_grams': 1980, 'consumption_type': 'quick', 'texture': 'kebab'},
    {'id': 'p_croq', 'sku': '821555', 'name': 'Croquettes de Poulet (Vraie viande)', 'price': 85.00, 'category': 'Poultry', 'package_weight_grams': 4000, 'consumption_type': 'quick', 'texture': 'prepared'},
    {'id': 'p_lanieres', 'sku': 'P051', 'name': 'Lanières de poulet panées', 'price': 78.00, 'category': 'Poultry', 'package_weight_grams': 2000, 'consumption_type': 'quick', 'texture': 'prepared'},

    # Pork
    {'id': 'po_151396', 'sku': '151396', 'name': 'Porc haché 85%', 'price': 80.50, 'category': 'Pork', 'package_weight_grams': 5000, 'consumption_type': 'staple', 'texture': 'ground'},
    {'id': 'po_811975', 'sku': '811975', 'name': 'Rôti de porc longe', 'price': 51.80, 'category': 'Pork', 'package_weight_grams': 3632, 'consumption_type': 'roast', 'texture': 'roast'},
    {'id': 'po_821524', 'sku': '821524', 'name': 'Bacon artisanal', 'price': 76.20, 'category': 'Pork', 'package_weight_grams': 3000, 'consumption_type': 'quick', 'texture': 'slice'},
    {'id': 'po_saucisse_it', 'sku': '821111', 'name': 'Saucisses Italiennes Douces', 'price': 65.00, 'category': 'Pork', 'package_weight_grams': 5000, 'consumption_type': 'quick', 'texture': 'sausage'},
    {'id': 'po_cotelette', 'sku': 'PO050', 'name': 'Côtelettes de porc désossées', 'price': 75.00, 'category': 'Pork', 'package_weight_grams': 2800, 'consumption_type': 'quick', 'texture': 'chop'},
    {'id': 'po_saucisse_dj', 'sku': '821112', 'name': 'Saucisses Déjeuner Érable', 'price': 68.00, 'category': 'Pork', 'package_weight_grams': 5000, 'consumption_type': 'quick', 'texture': 'sausage', 'is_breakfast': True},

    # Fish & seafood
    {'id': 'f_821256', 'sku': '821256', 'name': 'Pavé de saumon Atlantique', 'price': 95.90, 'category': 'Fish/Seafood', 'package_weight_grams': 2040, 'consumption_type': 'staple', 'texture': 'fillet'},
    {'id': 'f_aiglefin', 'sku': 'F050', 'name': "Filet d'Aiglefin (Haddock)", 'price': 85.00, 'category': 'Fish/Seafood', 'package_weight_grams': 2000, 'consumption_type': 'staple', 'texture': 'fillet'},
    {'id': 'f_tigre', 'sku': '821348', 'name': 'Crevettes Tigrées (Crues, 16-20)', 'price': 89.00, 'category': 'Fish/Seafood', 'package_weight_grams': 1816, 'consumption_type': 'quick', 'texture': 'shellfish'},
    {'id': 'f_petoncle', 'sku': '821349', 'name': 'Pétoncles Géants U-10', 'price': 145.00, 'category': 'Fish/Seafood', 'package_weight_grams': 2000, 'consumption_type': 'quick', 'texture': 'shellfish', 'is_premium': True},

    # Game
    {'id': 'g_veau', 'sku': 'G010', 'name': 'Escalopes de veau de grain', 'price': 132.00, 'category': 'Game', 'package_weight_grams': 2000, 'consumption_type': 'quick', 'texture': 'slice', 'is_premium': True},
    {'id': 'g_canard', 'sku': 'G020', 'name': 'Magret de canard', 'price': 118.00, 'category': 'Game', 'package_weight_grams': 1800, 'consumption_type': 'quick', 'texture': 'breast', 'is_premium': True},

    # Ready-to-eat
    {'id': 'pm_821379', 'sku': '821379', 'name': 'Lasagne à la viande', 'price': 118.70, 'category': 'Ready-to-eat', 'package_weight_grams': 2800, 'consumption_type': 'quick', 'texture': 'prepared'},
    {'id': 'pm_pat', 'sku': '821380', 'name': 'Pâté au Poulet (Format Familial)', 'price': 68.00, 'category': 'Ready-to-eat', 'package_weight_grams': 3200, 'consumption_type': 'quick', 'texture': 'prepared'},
    {'id': 'pm_sauce', 'sku': '821382', 'name': 'Sauce à Spaghetti (Viande)', 'price': 55.00, 'category': 'Ready-to-eat', 'package_weight_grams': 4000, 'consumption_type': 'staple', 'texture': 'liquid'},
    {'id': 'pm_tourtiere', 'sku': 'PM050', 'name': 'Tourtière du Lac', 'price': 55.00, 'category': 'Ready-to-eat', 'package_weight_grams': 3000, 'consumption_type': 'quick', 'texture': 'prepared'},

    # Appetizers
    {'id': 'a_rillettes', 'sku': 'A010', 'name': 'Rillettes de canard', 'price': 36.00, 'category': 'Appetizer', 'package_weight_grams': 1200, 'consumption_type': 'quick', 'texture': 'spread', 'is_appetizer': True},
]
