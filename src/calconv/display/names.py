"""
calconv.display.names
---------------------
Bundled English and French name tables, and lookups that resolve a date's
month, weekday, complementary day and era to text.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any, Dict, Optional, Tuple

from ..calendars.french_rev import DecadeDay
from ..core.errors import UnknownLanguageError
from ..cycles.weekday import Weekday

_GREGORIAN_EN = ("January", "February", "March", "April", "May", "June", "July",
                 "August", "September", "October", "November", "December")
_GREGORIAN_FR = ("janvier", "février", "mars", "avril", "mai", "juin", "juillet",
                 "août", "septembre", "octobre", "novembre", "décembre")

_EGYPTIAN = ("Thoth", "Phaophi", "Athyr", "Choiak", "Tybi", "Mechir", "Phamenoth",
             "Pharmuthi", "Pachon", "Payni", "Epiphi", "Mesori")
_ARMENIAN = ("Nawasardi", "Hori", "Sahmi", "Tre", "Kaloch", "Arach", "Mehekani",
             "Areg", "Ahekani", "Mareri", "Margach", "Hrotich", "Aweleac")
_COPTIC = ("Thoout", "Paope", "Athor", "Koiak", "Tobe", "Meshir", "Paremotep",
           "Parmoute", "Pashons", "Paone", "Epep", "Mesore", "Epagomene")
_ETHIOPIC = ("Maskaram", "Teqemt", "Hedar", "Takhsas", "Ter", "Yakatit", "Magabit",
             "Miyazya", "Genbot", "Sane", "Hamle", "Nahase", "Paguemen")
_FRENCH_REV = ("Vendémiaire", "Brumaire", "Frimaire", "Nivôse", "Pluviôse", "Ventôse",
               "Germinal", "Floréal", "Prairial", "Messidor", "Thermidor", "Fructidor")
_DECADE = ("Primidi", "Duodi", "Tridi", "Quartidi", "Quintidi", "Sextidi", "Septidi",
           "Octidi", "Nonidi", "Décadi")

# Which month table each calendar uses.
MONTH_TABLE = {
    "gregorian": "gregorian",
    "julian": "gregorian",
    "holocene": "gregorian",
    "roman": "gregorian",
    "egyptian": "egyptian",
    "armenian": "armenian",
    "coptic": "coptic",
    "ethiopic": "ethiopic",
    "cotsworth": "cotsworth",
    "positivist": "positivist",
    "symmetry454": "symmetry",
    "symmetry010": "symmetry",
    "symmetry454-solstice": "symmetry",
    "symmetry010-solstice": "symmetry",
    "french-rev": "french-rev",
    "french-rev-adjusted": "french-rev",
    "tranquility": "tranquility",
}

ERA_TABLE = {
    "gregorian": "common",
    "cotsworth": "common",
    "symmetry454": "common",
    "symmetry010": "common",
    "symmetry454-solstice": "common",
    "symmetry010-solstice": "common",
    "julian": "christian",
    "holocene": "holocene",
    "iso": "iso",
    "egyptian": "nabonassar",
    "armenian": "armenian",
    "coptic": "martyrs",
    "ethiopic": "incarnation",
    "positivist": "crisis",
    "french-rev": "republican",
    "french-rev-adjusted": "republican",
    "tranquility": "tranquility",
    "roman": "auc",
}


@dataclass(frozen=True)
class NameTable:
    lang: str
    weekdays: Tuple[str, ...]
    decade_days: Tuple[str, ...]
    months: Dict[str, Tuple[str, ...]]
    # Complementary day names indexed by the calendar's enum value.
    complementary: Dict[str, Dict[int, str]]
    # (after epoch, before epoch, after abbr, before abbr)
    eras: Dict[str, Tuple[str, str, str, str]]
    calendars: Dict[str, str]
    roman: Dict[str, str] = field(default_factory=dict)
    # (before noon, after noon, before abbr, after abbr)
    half_days: Tuple[str, str, str, str] = ("Ante Meridiem", "Post Meridiem", "AM", "PM")


EN = NameTable(
    lang="en",
    weekdays=("Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday"),
    decade_days=_DECADE,
    months={
        "gregorian": _GREGORIAN_EN,
        "cotsworth": _GREGORIAN_EN[:6] + ("Sol",) + _GREGORIAN_EN[6:],
        "symmetry": _GREGORIAN_EN + ("Irvember",),
        "egyptian": _EGYPTIAN,
        "armenian": _ARMENIAN,
        "coptic": _COPTIC,
        "ethiopic": _ETHIOPIC,
        "positivist": ("Moses", "Homer", "Aristotle", "Archimedes", "Caesar", "Saint Paul",
                       "Charlemagne", "Dante", "Gutenberg", "Shakespeare", "Descartes",
                       "Frederick", "Bichat"),
        "french-rev": _FRENCH_REV,
        "tranquility": ("Archimedes", "Brahe", "Copernicus", "Darwin", "Einstein", "Faraday",
                        "Galileo", "Hippocrates", "Imhotep", "Jung", "Kepler", "Lavoisier",
                        "Mendel"),
    },
    complementary={
        "egyptian": {1: "Birth of Osiris", 2: "Birth of Horus", 3: "Birth of Seth",
                     4: "Birth of Isis", 5: "Birth of Nephthys"},
        "cotsworth": {1: "Year Day", 2: "Leap Day"},
        "positivist": {1: "Festival of the Dead", 2: "Festival of Holy Women"},
        "french-rev": {1: "Celebration of Virtue", 2: "Celebration of Talent",
                       3: "Celebration of Labour", 4: "Celebration of Convictions",
                       5: "Celebration of Honours", 6: "Celebration of the Revolution"},
        "tranquility": {0: "Moon Landing Day", 1: "Armstrong Day", 2: "Aldrin Day"},
    },
    eras={
        "common": ("Common Era", "Before Common Era", "CE", "BCE"),
        "christian": ("Anno Domini", "Before Christ", "AD", "BC"),
        "holocene": ("Human Era", "Before Human Era", "HE", "BHE"),
        "iso": ("ISO Era", "Before ISO Era", "IE", "BIE"),
        "nabonassar": ("Era of Nabonassar", "Before the Era of Nabonassar", "EN", "BEN"),
        "armenian": ("Armenian Era", "Before the Armenian Era", "AE", "BAE"),
        "martyrs": ("Anno Martyrum", "Before the Era of Martyrs", "AM", "BAM"),
        "incarnation": ("Incarnation Era", "Before the Incarnation Era", "IE", "BIE"),
        "crisis": ("After the Great Crisis", "Before the Great Crisis", "AGC", "BGC"),
        "republican": ("Republican Era", "Before Republican Era", "RE", "BRE"),
        "tranquility": ("After Tranquility", "Before Tranquility", "AT", "BT"),
        "auc": ("Ab Urbe Condita", "Ante Urbem Conditam", "AUC", "AUC"),
    },
    calendars={
        "gregorian": "Gregorian", "julian": "Julian", "iso": "ISO week date",
        "jdn": "Julian Day Number", "mjd": "Modified Julian Day", "rd": "Rata Die",
        "unix": "Unix day", "holocene": "Holocene", "egyptian": "Egyptian",
        "armenian": "Armenian", "coptic": "Coptic", "ethiopic": "Ethiopic",
        "cotsworth": "International Fixed", "positivist": "Positivist",
        "symmetry454": "Symmetry454", "symmetry010": "Symmetry010",
        "symmetry454-solstice": "Symmetry454 (solstice)",
        "symmetry010-solstice": "Symmetry010 (solstice)",
        "french-rev": "French Revolutionary", "french-rev-adjusted": "French Revolutionary (adjusted)",
        "roman": "Roman", "tranquility": "Tranquility",
    },
    roman={"kalends": "Kalends", "nones": "Nones", "ides": "Ides", "of": "of",
           "pridie": "Pridie", "ante_diem": "Ante Diem", "bissextum": "Bis"},
)

FR = NameTable(
    lang="fr",
    weekdays=("dimanche", "lundi", "mardi", "mercredi", "jeudi", "vendredi", "samedi"),
    decade_days=_DECADE,
    months={
        "gregorian": _GREGORIAN_FR,
        "cotsworth": _GREGORIAN_FR[:6] + ("sol",) + _GREGORIAN_FR[6:],
        "symmetry": _GREGORIAN_FR + ("irvembre",),
        "egyptian": _EGYPTIAN,
        "armenian": _ARMENIAN,
        "coptic": _COPTIC,
        "ethiopic": _ETHIOPIC,
        "positivist": ("Moïse", "Homère", "Aristote", "Archimède", "César", "Saint Paul",
                       "Charlemagne", "Dante", "Gutenberg", "Shakespeare", "Descartes",
                       "Frédéric", "Bichat"),
        "french-rev": _FRENCH_REV,
        "tranquility": ("Archimède", "Brahe", "Copernic", "Darwin", "Einstein", "Faraday",
                        "Galilée", "Hippocrate", "Imhotep", "Jung", "Kepler", "Lavoisier",
                        "Mendel"),
    },
    complementary={
        "egyptian": {1: "Naissance d'Osiris", 2: "Naissance d'Horus", 3: "Naissance de Seth",
                     4: "Naissance d'Isis", 5: "Naissance de Nephthys"},
        "cotsworth": {1: "Jour de l'année", 2: "Journée bissextile"},
        "positivist": {1: "La Fête universelle des Morts", 2: "La Fête Générale des Saintes Femmes"},
        "french-rev": {1: "La Fête de la Vertu", 2: "La Fête du Génie", 3: "La Fête du Travail",
                       4: "La Fête de l'Opinion", 5: "La Fête des Récompenses",
                       6: "La Fête de la Révolution"},
        "tranquility": {0: "Jour de l'alunissage", 1: "Jour d'Armstrong", 2: "Jour d'Aldrin"},
    },
    eras={
        "common": ("de l'ère commune", "avant l'ère commune", "EC", "AEC"),
        "christian": ("après Jésus-Christ", "avant Jésus-Christ", "ap. J.-C.", "av. J.-C."),
        "holocene": ("ère humaine", "avant l'ère humaine", "EH", "AEH"),
        "iso": ("ère ISO", "avant l'ère ISO", "EI", "AEI"),
        "nabonassar": ("ère de Nabonassar", "avant l'ère de Nabonassar", "EN", "AEN"),
        "armenian": ("ère arménienne", "avant l'ère arménienne", "EA", "AEA"),
        "martyrs": ("ère des Martyrs", "avant l'ère des Martyrs", "AM", "AAM"),
        "incarnation": ("ère de l'Incarnation", "avant l'ère de l'Incarnation", "EI", "AEI"),
        "crisis": ("après la Grande Crise", "avant la Grande Crise", "AGC", "AVGC"),
        "republican": ("ère républicaine", "avant l'ère républicaine", "ER", "AER"),
        "tranquility": ("après la Tranquillité", "avant la Tranquillité", "AT", "AVT"),
        "auc": ("Ab Urbe Condita", "Ante Urbem Conditam", "AUC", "AUC"),
    },
    calendars={
        "gregorian": "grégorien", "julian": "julien", "iso": "semaine ISO",
        "jdn": "jour julien", "mjd": "jour julien modifié", "rd": "Rata Die",
        "unix": "jour Unix", "holocene": "holocène", "egyptian": "égyptien",
        "armenian": "arménien", "coptic": "copte", "ethiopic": "éthiopien",
        "cotsworth": "fixe international", "positivist": "positiviste",
        "symmetry454": "Symmetry454", "symmetry010": "Symmetry010",
        "symmetry454-solstice": "Symmetry454 (solstice)",
        "symmetry010-solstice": "Symmetry010 (solstice)",
        "french-rev": "républicain", "french-rev-adjusted": "républicain (ajusté)",
        "roman": "romain", "tranquility": "Tranquillité",
    },
    roman={"kalends": "Calendes", "nones": "Nones", "ides": "Ides", "of": "de",
           "pridie": "Pridie", "ante_diem": "Ante Diem", "bissextum": "Bis"},
)

TABLES: Dict[str, NameTable] = {"en": EN, "fr": FR}


def get_table(lang: str) -> NameTable:
    if lang not in TABLES:
        raise UnknownLanguageError(f"Unknown language '{lang}'. Available: {sorted(TABLES)}")
    return TABLES[lang]


# ---------------------------------------------------------
# Lookups used by the token resolvers
# ---------------------------------------------------------

def month_name(date: Any, table: NameTable) -> Optional[str]:
    key = MONTH_TABLE.get(date.NAME)
    month = getattr(date, "month", None)
    if key is None or month is None:
        return None
    names = table.months[key]
    if not (1 <= month <= len(names)):
        return None
    return names[month - 1]


def weekday_name(value: Optional[IntEnum], table: NameTable) -> Optional[str]:
    if value is None:
        return None
    if isinstance(value, DecadeDay):
        return table.decade_days[int(value) - 1]
    if isinstance(value, Weekday):
        return table.weekdays[int(value)]
    raise TypeError(f"no weekday names for {type(value).__name__}")


def complementary_name(date: Any, table: NameTable) -> Optional[str]:
    compl = date.complementary()
    if compl is None:
        return None
    names = table.complementary.get(MONTH_TABLE.get(date.NAME, date.NAME))
    if names is None:
        return None
    return names.get(int(compl))


def era_name(date: Any, table: NameTable, *, abbreviated: bool = False) -> Optional[str]:
    key = ERA_TABLE.get(date.NAME)
    if key is None:
        return None
    year = date.auc_year() if key == "auc" else date.year
    if key == "tranquility" and year == 0:
        return None
    after, before, after_abbr, before_abbr = table.eras[key]
    if year < 0:
        return before_abbr if abbreviated else before
    return after_abbr if abbreviated else after


def calendar_name(name: str, table: NameTable) -> str:
    return table.calendars.get(name, name)
