import pytest

from conquest.battle import predicates
from conquest.battle.battlefield import Battlefield, BattleState
from conquest.battle.calculators import (
    Condition,
    EffectAll,
    EffectIndices,
    EffectSelf,
    SupportPowerMultiplier,
)
from conquest.battle.events import BattleAbandoned, BattleWon, EventBus
from conquest.battle.modifiers import PowerModifier
from conquest.battle.skills import BattleCardSkill
from conquest.cards.structures import CardSlotModifier, StructureCard, SupportPowerModifier
from conquest.enemies import skills as enemy_skills


def skill(calculator, skill_id="skill"):
    return BattleCardSkill(skill_id=skill_id, calculator=calculator)


@pytest.mark.parametrize(
    "enemy_power, powers, support, expected",
    [
        (10, [5, 5], 0, True),  # exactly equal counts as a win
        (10, [5], 0, False),
        (25, [10, 8, 7.5], 0, True),
        (25, [10, 8], 0, False),
        (25, [10, 8], 10, True),
        (10, [5], 6, True),
        (50, [30], 0, False),
        (50, [30, 30], 5, True),
    ],
)
def test_can_beat_without_skills(make_card, make_enemy, enemy_power, powers, support, expected):
    enemy = make_enemy(power=enemy_power, card_slot=len(powers))
    bf = Battlefield(enemy, support, [make_card(f"c{i}", p) for i, p in enumerate(powers)])
    assert bf.can_beat() is expected
    assert bf.total_power() == pytest.approx(sum(powers) + support)


def test_can_beat_is_idempotent(make_card, make_enemy):
    bf = Battlefield(make_enemy(power=10), 0, [make_card(power=5), make_card(power=5)])
    assert [bf.can_beat() for _ in range(5)] == [True] * 5
    assert bf.state is BattleState.ASSEMBLING


def test_enemy_type_guarded_multiplier(make_card, make_enemy):
    slayer = make_card(
        "slayer",
        power=4,
        skill=skill(Condition(predicates.enemy_type_is("dragon"), EffectSelf(PowerModifier(multiplicative_buff=1.0)))),
    )
    vs_dragon = Battlefield(make_enemy(enemy_type="dragon"), 0, [slayer])
    vs_orc = Battlefield(make_enemy(enemy_type="orc"), 0, [slayer])
    assert vs_dragon.calculated_powers() == [pytest.approx(8)]
    assert vs_orc.calculated_powers() == [pytest.approx(4)]


def test_enemy_debuff_against_protection(make_card, make_enemy):
    enemy = make_enemy(skills=[enemy_skills.additive_debuff_all("roar", 1.0)])
    guarded = make_card("guarded", power=5, skill=skill(EffectSelf(PowerModifier(protection=999))))
    exposed = make_card("exposed", power=5)
    weak = make_card("weak", power=0.5)

    bf = Battlefield(enemy, 0, [guarded, exposed, weak])
    assert bf.calculated_powers() == [pytest.approx(5), pytest.approx(4), 0.0]


def test_protection_does_not_cross_slots(make_card, make_enemy):
    enemy = make_enemy(skills=[enemy_skills.additive_debuff_all("roar", 2.0)])
    shield = make_card("shield", power=5, skill=skill(EffectSelf(PowerModifier(protection=5))))
    other = make_card("other", power=5)
    bf = Battlefield(enemy, 0, [shield, other])
    assert bf.calculated_powers() == [pytest.approx(5), pytest.approx(3)]


def test_neighbour_protection(make_card, make_enemy):
    enemy = make_enemy(card_slot=4, skills=[enemy_skills.multiplicative_debuff_all("fear", 0.5)])
    knight = make_card("knight", power=8, skill=skill(EffectIndices(PowerModifier(protection=0.5))))
    left = make_card("left", power=4)
    right = make_card("right", power=4)
    far = make_card("far", power=4)
    bf = Battlefield(enemy, 0, [left, knight, right, far])
    assert bf.calculated_powers() == [pytest.approx(4), pytest.approx(4), pytest.approx(4), pytest.approx(2)]


def test_support_power_bonus_adds_to_team_not_card(make_card, make_enemy):
    quartermaster = make_card("qm", power=2, skill=skill(SupportPowerMultiplier(5)))
    bf = Battlefield(make_enemy(power=17), 10, [quartermaster])
    report = bf.evaluate()
    assert report.card_powers == [pytest.approx(2)]
    assert report.support_power == pytest.approx(15)
    assert report.total_power == pytest.approx(17)
    assert report.can_beat


def test_support_power_bonus_counts_without_base_support(make_card, make_enemy):
    banner = make_card("banner", power=5, skill=skill(SupportPowerMultiplier(5.0)))
    bf = Battlefield(make_enemy(power=10), 0, [banner])
    assert bf.calculated_powers() == [pytest.approx(5)]
    assert bf.total_power() == pytest.approx(10)
    assert bf.can_beat() is True


def test_support_power_bonuses_stack(make_card, make_enemy):
    cards = [make_card(f"qm{i}", power=1, skill=skill(SupportPowerMultiplier(2))) for i in range(3)]
    report = Battlefield(make_enemy(card_slot=3), 4, cards).evaluate()
    assert report.support_power == pytest.approx(10)
    assert report.total_power == pytest.approx(13)


def test_player_and_enemy_modifiers_resolve_once(make_card, make_enemy):
    # Buff and debuff land on the same slot; protection is applied to the summed debuff.
    enemy = make_enemy(skills=[enemy_skills.additive_debuff_all("a", 2), enemy_skills.additive_debuff_all("b", 2)])
    bard = make_card("bard", power=2, skill=skill(EffectAll(PowerModifier(additive_buff=1, protection=1))))
    bf = Battlefield(enemy, 0, [bard, make_card("x", power=6)])
    # each slot: additive_debuff 4, protection 1 => 3 effective, buff +1
    assert bf.calculated_powers() == [pytest.approx(0), pytest.approx(4)]


def test_card_order_changes_index_relative_results(make_card, make_enemy):
    enemy = make_enemy(skills=[enemy_skills.index_forward_multiplicative_debuff("wall", 1, 0.5)])
    strong = make_card("strong", power=10)
    weak = make_card("weak", power=2)
    assert Battlefield(enemy, 0, [strong, weak]).total_power() == pytest.approx(7)
    assert Battlefield(enemy, 0, [weak, strong]).total_power() == pytest.approx(11)


def test_slot_capacity(make_card, make_enemy):
    bf = Battlefield(make_enemy(card_slot=2))
    assert bf.add_card(make_card("a"))
    assert bf.add_card(make_card("b"))
    assert bf.add_card(make_card("c")) is False
    assert [c.card_id for c in bf.cards] == ["a", "b"]


def test_initial_cards_respect_slot_capacity(make_card, make_enemy):
    bf = Battlefield(make_enemy(card_slot=1), 0, [make_card("a"), make_card("b"), make_card("c")])
    assert [c.card_id for c in bf.cards] == ["a"]
    assert bf.is_full
    assert bf.add_card(make_card("d")) is False


def test_remove_card(make_card, make_enemy):
    bf = Battlefield(make_enemy(), 0, [make_card("a"), make_card("b")])
    assert bf.remove_card(5) is None
    assert bf.remove_card(-1) is None
    removed = bf.remove_card(0)
    assert removed is not None and removed.card_id == "a"
    assert [c.card_id for c in bf.cards] == ["b"]


def test_structures_extend_slots_and_support(make_enemy):
    fortress = StructureCard("fortress", battlefield_modifiers=(CardSlotModifier(1), SupportPowerModifier(10)))
    tower = StructureCard("tower", battlefield_modifiers=(SupportPowerModifier(5),))
    bf = Battlefield.create(make_enemy(card_slot=2), 1.0, [fortress, tower])
    assert bf.card_slot == 3
    assert bf.base_support_power == pytest.approx(16)


def test_beat_transitions_and_publishes(make_card, make_enemy):
    bus = EventBus()
    won = []
    bus.subscribe(BattleWon, won.append)
    bf = Battlefield(make_enemy("orc_camp", power=10), 0, [make_card(power=5)], event_bus=bus)

    assert bf.beat() is False
    assert bf.state is BattleState.ASSEMBLING
    assert bf.add_card(make_card(power=5))
    assert bf.beat() is True
    assert bf.state is BattleState.WON
    assert won == [BattleWon("orc_camp", 10.0, 10.0)]
    # Cards stay put; the battlefield is now closed
    assert len(bf.cards) == 2
    assert bf.beat() is False
    assert bf.add_card(make_card()) is False
    assert bf.remove_card(0) is None
    assert len(won) == 1


def test_abandon_returns_cards(make_card, make_enemy):
    bus = EventBus()
    abandoned = []
    bus.subscribe(BattleAbandoned, abandoned.append)
    bf = Battlefield(make_enemy("camp"), 0, [make_card("a"), make_card("b")], event_bus=bus)

    returned = bf.abandon()
    assert [c.card_id for c in returned] == ["a", "b"]
    assert bf.cards == []
    assert bf.state is BattleState.ABANDONED
    assert abandoned == [BattleAbandoned("camp", ("a", "b"))]
    assert bf.abandon() == []
    assert bf.beat() is False


def test_leveled_card_power(make_card, make_enemy):
    veteran = make_card(power=10, experience=100)
    bf = Battlefield(make_enemy(power=11), 0, [veteran])
    assert bf.calculated_powers() == [pytest.approx(11)]
    assert bf.can_beat()
