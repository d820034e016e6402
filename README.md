# hockeysim

The data model for a hockey league simulation. It covers players, their
ratings and development, teams and their line-ups, staff, contracts, season
statistics, name pools for generating people, and a simplified in-game
calendar. The package uses only the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `hockeysim.dates`: `GameDate` is a frozen, ordered date on a calendar of
  twelve 30-day months. It has `to_day_index` / `from_day_index`, `weekday`,
  `weekday_name`, `weekday_enum` (a `Weekday`), `month_name`, `add_days`
  (which clamps at day 0 of year 0), `days_between`, `start_of_year`,
  `end_of_year`, `is_same_day`, and `parse` for `YEAR-MONTH-DAY` strings.
  Invalid dates raise `DateError`, a `ValueError` subclass.
- `hockeysim.contract`: `Contract`, `ContractType`, `ContractLimits` and
  `TeamContractSettings`, each with an `nhl_default()` where there is one.
  `validate` raises `ValueError` that names the first term out of range.
- `hockeysim.stats`: `PlayerStats`, `GoalieStats` and `TeamStats`.
  `record_skater_game`, `record_goalie_game` and `record_game` add one
  game's numbers to the totals. Derived values are `points`,
  `save_percentage`, `goals_against_average`, `goal_differential`,
  `power_play_percentage` and `penalty_kill_percentage`.
- `hockeysim.movement`: `SkatingStats`, `GoalieMovement` and `SkatingType`.
  `apply_delta` keeps every rating within `1..max_rating`.
- `hockeysim.playing`: `GameView` (with a `ViewStyle`) and `Skills`. Each
  has a `random()` constructor that draws ratings from 1 to 100.
- `hockeysim.projection`: `Projection`, `DraftProjection`,
  `DevelopmentProfile` and `ProjectionGenerationSettings`. It also has
  `ProjMax.from_quality`, `DevelopmentCurve.from_profile`,
  `growth_window_for_curve`, `clamp_unit` and `scale_to_range`.
- `hockeysim.player`: `Player`, with the `new_skater` / `new_goalie`
  constructors. Its development methods are `develop`, `age_develop`,
  `guess_overall` and their helpers. The module also has random attribute
  helpers (`random_type`, `random_position`, `random_playtype_from_pos`,
  `random_height_cm`, `random_weight_kg`, `random_birth_location`) and the
  `scale` / `develop_*` rating scalers.
- `hockeysim.staff`: `StaffMember`, `StaffRole`, `StaffRatings` and
  `StaffDevelopment`. `develop()` grows ratings toward the member's potential.
- `hockeysim.team`: `Team` holds the roster, staff, `TeamStats`, contract
  settings and `Loadout`. It has lookups for the head coach, head scout,
  development coaches and scouts, plus cap totals. `auto_assign_lines`
  fills the lines with the highest-rated player at each position.
- `hockeysim.line`: `Loadout`, which stores the roster indices for four
  forward lines, three defence pairs and two goalies.
- `hockeysim.names`: `Conference` and `Division`, either built-in or custom.
- `hockeysim.helper`: `DraftStatus` and `DraftData`.
- `hockeysim.location`: `Location` and `Places`.
- `hockeysim.general_data`: the `Position`, `Type` and `PlayType` enums,
  `General` (body measurements with growth flags), and `NameData`, the pools
  of names and places. `NameData` is saved as JSON under a directory that
  defaults to `data/NameData`.

## Example

```python
from hockeysim.dates import GameDate
from hockeysim.contract import Contract, ContractType, ContractLimits
from hockeysim.general_data import NameData

date = GameDate.parse("5-3-14")
print(date)                      # Mar 14, Year 5 (<weekday>)
print(date.add_days(30))         # Apr 14, Year 5 (<weekday>)

contract = Contract(ContractType.STANDARD, 3, 4.5, 4.5, 0.0, 0.0, 0, 0)
contract.validate(ContractLimits.nhl_default())  # raises ValueError if out of range

names = NameData()
names.add_first_names(["Alex", "Sam"])
names.add_last_names(["Smith", "Jones"])
names.save("demo", directory="names")
print(NameData.load("demo", directory="names").random_full_name())
```

## What it does not do

This package is a data model only. It does not play games or simulate
seasons, and it does not generate draft classes or whole prospects. It has
no league-level storage beyond the `NameData` JSON files and no command-line
program.