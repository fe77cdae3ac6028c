import pytest

from survivordle.engine import Appearance

# Survivor 41 winner, used as the default target in tests.
BASE = dict(
    id="erika_41",
    person_id="erika",
    name="Erika Casupanan",
    season=41,
    season_name="Survivor 41",
    placement=1,
    gender="F",
    starting_tribe="Ua",
    returnee=False,
    age=24,
    episode_out=None,
    day=26,
    jury_tier="Winner",
    placed_before=None,
    placed_after="Deshawn Radden",
)


def make(**overrides) -> Appearance:
    fields = dict(BASE)
    fields.update(overrides)
    return Appearance(**fields)


@pytest.fixture
def target() -> Appearance:
    return make()


@pytest.fixture
def small_pool():
    return [
        make(),
        make(id="deshawn_41", person_id="deshawn", name="Deshawn Radden", placement=2,
             gender="M", starting_tribe="Luvu", jury_tier="Finalist", age=26),
        make(id="xander_41", person_id="xander", name="Xander Hastings", placement=3,
             gender="M", starting_tribe="Yase", jury_tier="Finalist", age=20),
        make(id="heather_41", person_id="heather", name="Heather Aldret", placement=4,
             gender="F", starting_tribe="Yase", jury_tier="Jury", age=52, episode_out=13),
        make(id="maryanne_42", person_id="maryanne", name="Maryanne Oketch", season=42,
             season_name="Survivor 42", placement=1, starting_tribe="Vati", age=23),
        make(id="abi_25", person_id="abi", name="Abi-Maria Gomes", season=25,
             season_name="Philippines", placement=8, starting_tribe="Tandang",
             jury_tier="Jury", age=32, episode_out=11, returnee=True),
    ]


@pytest.fixture
def make_appearance():
    return make
