import sys
from pathlib import Path

import pytest

# Ensure 'src' is on sys.path for test imports without installing the package
ROOT = Path(__file__).resolve().parents[1]
src = ROOT / "src"
if str(src) not in sys.path:
    sys.path.insert(0, str(src))

from conquest.cards.models import BattleCard  # noqa: E402
from conquest.enemies.models import Enemy  # noqa: E402


@pytest.fixture
def make_card():
    def _make(card_id="card", power=5.0, card_type="warrior", skill=None, experience=0):
        return BattleCard(card_id=card_id, base_power=power, card_type=card_type, skill=skill, experience=experience)

    return _make


@pytest.fixture
def make_enemy():
    def _make(enemy_id="enemy", enemy_type="orc", power=10.0, card_slot=3, skills=()):
        return Enemy(enemy_id=enemy_id, enemy_type=enemy_type, power=power, card_slot=card_slot, skills=tuple(skills))

    return _make
