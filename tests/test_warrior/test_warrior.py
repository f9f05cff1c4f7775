import pytest
from pydantic import ValidationError

from arena.warrior import Warrior, Rank, RANKS, FightOutcome


def test_new_warrior(warrior):
    assert warrior.level == 1
    assert warrior.experience == 100
    assert warrior.rank == "Pushover"
    assert warrior.achievements == ()


@pytest.mark.parametrize("experience", [100, 150, 999, 1000, 4550, 8999, 9900, 10000])
def test_level_and_rank_follow_experience(experience):
    warrior = Warrior(experience=experience)
    assert warrior.level == experience // 100
    assert warrior.rank == RANKS[warrior.level // 10]


def test_constructor_derives_level_and_rank():
    warrior = Warrior(experience=5000, level=3, rank=Rank.GREATEST)
    assert warrior.level == 50
    assert warrior.rank == Rank.SAGE


def test_constructor_clamps_experience():
    warrior = Warrior(experience=50000)
    assert warrior.experience == 10000
    assert warrior.level == 100
    assert warrior.rank == Rank.GREATEST


def test_unknown_field_rejected():
    with pytest.raises(ValidationError):
        Warrior(strength=10)


def test_reads_are_idempotent(warrior):
    warrior.train("Sparring", 50, 1)
    snapshot = (warrior.level, warrior.experience, warrior.rank, warrior.achievements)
    for _ in range(3):
        assert (warrior.level, warrior.experience, warrior.rank, warrior.achievements) == snapshot


def test_achievements_are_read_only(warrior):
    warrior.train("Sparring", 50, 1)
    with pytest.raises(AttributeError):
        warrior.achievements.append("Cheating")  # type: ignore[attr-defined]
    assert warrior.achievements == ("Sparring",)


def test_progress():
    assert Warrior(experience=150).progress == 0.5
    assert Warrior(experience=200).progress == 0.0
    assert Warrior(experience=10000).progress == 1.0


def test_progress_below_zero_experience():
    warrior = Warrior(experience=1000)
    warrior.train("Injury", -1050, 1)

    assert warrior.experience == -50
    assert warrior.progress == 0.0
    assert Warrior(experience=50).progress == 0.5


def test_model_dump_has_no_event_bus(warrior, event_bus):
    warrior.attach_event_bus(event_bus)
    dumped = warrior.model_dump()
    assert set(dumped) == {"experience", "level", "rank", "achievements"}
    assert dumped["experience"] == 100
    assert dumped["rank"] == Rank.PUSHOVER


def test_clone_keeps_progress(warrior):
    warrior.battle(6)
    copy = warrior.clone()
    copy.battle(6)

    assert warrior.experience == 600
    assert copy.experience == 610


def test_outcome_labels():
    assert [str(outcome) for outcome in FightOutcome] == [
        "Invalid level",
        "Easy fight",
        "A good fight",
        "An intense fight",
        "You've been defeated",
        "Not strong enough",
    ]
    assert FightOutcome.GOOD_FIGHT.is_victory
    assert not FightOutcome.DEFEATED.is_victory
