# excursions

A small console application for keeping a list of club excursions.
Excursions are stored one per line in a semicolon-separated text file.
From an interactive menu they can be added or looked up by date.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Usage

Start the application with:

```
excursions
```

or with `python -m excursions.console`.

A numbered menu is shown. Type the number of an option and press Enter:

```
Main Menu
1. Excursion management
2. Exit
```

Choosing **Excursion management** opens this menu:

```
Excursion management Menu
1. Add Excursion
2. Get Excursion By Date
3. Exit Menu
4. Exit
```

- **Add Excursion** asks for an id, a description, a date, a price and a
  duration in days. It then appends the excursion to the data file.
- **Get Excursion By Date** asks for a start date and an end date. It
  prints `N- Description <description>` for each matching excursion.
  Either date may be left empty, but not both. If both are empty, the
  message `a start date or an end date is required` is printed.
- **Exit Menu** goes back to the main menu.
- **Exit** prints `Closing App` and ends the application.

A number outside the range of the menu shows the menu again. Price,
duration and menu choices are read as integers: the leading integer on
the line is used. A line that does not start with a number stops the
application with a `ValueError`. When input ends, the application stops
quietly.

Dates are written as `YYYY-MM-DD`.

## Data file

Excursions are read from `filedb/excursions.txt`, relative to the current
directory. Each line holds one excursion as follows:

```
id;description;date;price;duration_days
```

If the file does not exist, `File not found` is printed and the list
starts empty. Adding an excursion appends a line to the file and creates
the file if it is missing. The `filedb` directory itself must already
exist. A field that contains `;` or a line break is rejected with a
`ValueError`.

## Date filtering

Lookups by date follow these rules:

- with both a start and an end date, the excursions strictly between the
  two dates are listed;
- with only one of the two dates, the excursions on or after that date
  are listed;
- with neither date, `excursions.datefilters.get_filter` returns `None`
  and the lookup raises `ValueError`.

The same logic can be used from Python:

```python
from excursions.datefilters import get_filter

date_filter = get_filter("2024-01-01", "2024-12-31")
date_filter.filter("2024-06-15")   # True
get_filter("", "") is None         # True
```

`excursions.dateutils` provides these comparison helpers:

- `convert` parses a `YYYY-MM-DD` string into a `datetime.date` and raises
  `ValueError` on bad input;
- `equals`, `before`, `after` and `between` compare dates. `after`
  counts the same day as after, and `between` is strict at both ends.

## Library use

- `excursions.controller.ExcursionController` offers `add(excursion)` and
  `get_by_dates(start_date, end_date)`. It takes any `ExcursionDao`. The
  default is `ExcursionFileDao`, which reads the data file described
  above.
- `excursions.filedao` holds the storage classes:
  - the abstract `ExcursionDao`, `FederationDao` and `SecureDao`;
  - `FileDao`, with `read_file()` and `append_record(fields)`;
  - `ExcursionFileDao`;
  - `FederationFileDao`, which reads `id;name` lines from
    `filedb/federations.txt`.
- `excursions.models` holds the record types:
  - `Excursion`, `Federation` and `Inscription`;
  - `Secure`, with its `SecureType` (`BASIC`, `COMPLETE`);
  - the abstract `Partner`.
- The partner types in `excursions.models` and their `discount()` on the
  monthly fee are:
  - `ChildrenPartner`: 50;
  - `FederatedPartner`: 5, with `excursion_discount` 10;
  - `StandardPartner`: 0.
- `excursions.ui` defines the `Command`, `Menu` and `View` abstractions
  and the `Execution` enum. `excursions.console` builds the menus above
  from them. Its `Console` can be given its own input and output streams.

## What it does not do

- The menus only add and look up excursions. Excursions cannot be edited
  or deleted.
- Federations can be read through `FederationFileDao`, but no menu shows
  them.
- Partners, inscriptions and insurance policies exist only as in-memory
  model objects. They are not stored anywhere.
- `SecureDao` has no file-backed implementation.