"""
Test data fixtures for medication search testing.

Provides:
- A record builder for dataset-shaped dictionaries
- A small representative CKD catalog
- Malformed records for loader resilience tests
"""

from typing import Any, Dict, List, Optional


def med_record(name: str,
               brands: Optional[List[Any]] = None,
               aliases: Optional[List[Dict[str, str]]] = None,
               form: str = 'tablet',
               strength: str = '5',
               unit: str = 'mg',
               category: str = 'other') -> Dict[str, Any]:
    """
    Build one dataset record.

    ``brands`` items may be a bare name (real, primary if first) or a full
    brand object.
    """
    brand_names = []
    for index, brand in enumerate(brands or []):
        if isinstance(brand, str):
            brand = {'name': brand, 'primary': index == 0}
        brand_names.append(brand)

    record = {
        'name': name,
        'form': form,
        'strength': strength,
        'unit': unit,
        'route': 'oral',
        'category': category,
        'brand_names': brand_names,
    }
    if aliases is not None:
        record['search_aliases'] = aliases
    return record


# ============================================================================
# SAMPLE CATALOG
# ============================================================================

SAMPLE_CATALOG = [
    med_record('Benazepril', brands=['Fortekor', 'Benazecare'],
               aliases=[{'text': 'benazapril', 'type': 'generic'},
                        {'text': 'fortecor', 'type': 'brand'}],
               category='ACE_inhibitor'),
    med_record('Mirtazapine', brands=['Mirataz'], form='transdermal', strength='2', unit='%',
               category='appetite_stimulant'),
    med_record('Maropitant', brands=['Cerenia', 'Prevomax'], strength='16', category='antiemetic'),
    med_record('Cerenia', brands=['Cerenia'], strength='16', category='antiemetic'),
    med_record('Amlodipine', brands=[{'name': 'Norvasc', 'primary': False},
                                     {'name': 'Amodip', 'primary': True}],
               strength='1.25', category='calcium_channel_blocker'),
    med_record('Aluminum hydroxide', brands=[{'name': 'Various generics', 'primary': True, 'real': False}],
               aliases=[{'text': 'aluminium hydroxide', 'type': 'generic'}],
               form='powder', strength='variable', category='phosphate_binder'),
    med_record('Potassium gluconate', brands=['Tumil-K', 'Renal K+'],
               aliases=[{'text': 'tumil k', 'type': 'brand'}],
               form='gel', strength='variable', unit='mEq', category='electrolyte_supplement'),
    med_record('Telmisartan', brands=['Semintra'], form='oral_solution', strength='4', unit='mg/mL',
               category='angiotensin_receptor_blocker'),
]


# ============================================================================
# MALFORMED RECORDS
# ============================================================================

# Each of these must be dropped without affecting its siblings
INVALID_RECORDS = [
    med_record(''),                                   # empty name
    {'unexpected_field': 'value'},                    # no name at all
    med_record('Bad Form', form='suppository'),       # unknown form
    med_record('Bad Strength', strength='lots'),      # non-numeric strength
    'not an object',                                  # not a mapping
    {'name': 'Bad Brands', 'brand_names': 42},        # wrong brand container
    {'name': 'Bad Alias', 'search_aliases': [{'text': 'x', 'type': 'nickname'}]},
    med_record('No Form', form=''),                   # form required
    med_record('No Strength', strength=''),           # strength required
    med_record('No Unit', unit=''),                   # unit required
    {'name': 'Benazepril'},                           # name only
]


# Legacy dataset layout: comma-separated brand and alias strings
LEGACY_RECORDS = [
    {
        'name': 'Benazepril',
        'form': 'tablet',
        'strength': '5',
        'unit': 'mg',
        'route': 'oral',
        'category': 'ACE_inhibitor',
        'brand_names': 'Fortekor, Benazecare',
        'search_aliases': 'benazapril, benzapril',
    },
    {
        'name': 'Aluminum hydroxide',
        'form': 'powder',
        'strength': 'variable',
        'unit': 'mg',
        'route': 'oral',
        'category': 'phosphate_binder',
        'brand_names': 'Various generics',
    },
]
