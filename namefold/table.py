"""Fixed fold table from decoded scalar values to ASCII replacements."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional, Tuple

__all__ = [
    "FoldKind",
    "Fold",
    "FOLD_TABLE",
    "EN_DASH",
    "COMBINING_RANGES",
    "lookup",
]


class FoldKind(str, Enum):
    LITERAL = "literal"
    SILENT = "silent"
    HYPHEN = "hyphen"
    UNRECOGNIZED = "unrecognized"


@dataclass(frozen=True)
class Fold:
    kind: FoldKind
    text: str = ""


EN_DASH = 0x2013

# Combining marks attach to a base letter that is already folded.
COMBINING_RANGES: Tuple[Tuple[int, int], ...] = (
    (0x0300, 0x036F),
    (0x1AB0, 0x1AFF),
    (0x1DC0, 0x1DFF),
)

# (replacement, characters folded to it)
_FOLD_ROWS: Tuple[Tuple[str, str], ...] = (
    ("A", "AⒶＡÀÁÂẦẤẪẨÃĀĂẰẮẴẲȦǠÄǞẢÅǺǍȀȂẠẬẶḀĄȺⱯ"),
    ("AA", "Ꜳ"),
    ("A", "ÆǼǢ"),
    ("AO", "Ꜵ"),
    ("AU", "Ꜷ"),
    ("AV", "ꜸꜺ"),
    ("AY", "Ꜽ"),
    ("B", "BⒷＢḂḄḆɃƂƁ"),
    ("C", "CⒸＣĆĈĊČÇḈƇȻꜾ"),
    ("D", "DⒹＤḊĎḌḐḒḎĐƋƊƉꝹ"),
    ("DZ", "ǱǄ"),
    ("Dz", "ǲǅ"),
    ("E", "EⒺＥÈÉÊỀẾỄỂẼĒḔḖĔĖËẺĚȄȆẸỆȨḜĘḘḚƐƎ"),
    ("F", "FⒻＦḞƑꝻ"),
    ("G", "GⒼＧǴĜḠĞĠǦĢǤƓꞠꝽꝾ"),
    ("H", "HⒽＨĤḢḦȞḤḨḪĦⱧⱵꞍ"),
    ("I", "IⒾＩÌÍÎĨĪĬİÏḮỈǏȈȊỊĮḬƗ"),
    ("J", "JⒿＪĴɈ"),
    ("K", "KⓀＫḰǨḲĶḴƘⱩꝀꝂꝄꞢ"),
    ("L", "LⓁＬĿĹĽḶḸĻḼḺŁȽⱢⱠꝈꝆꞀ"),
    ("LJ", "Ǉ"),
    ("Lj", "ǈ"),
    ("M", "MⓂＭḾṀṂⱮƜ"),
    ("N", "NⓃＮǸŃÑṄŇṆŅṊṈȠƝꞐꞤ"),
    ("NJ", "Ǌ"),
    ("Nj", "ǋ"),
    ("O", "OⓄＯÒÓÔỒỐỖỔÕṌȬṎŌṐṒŎȮȰÖȪỎŐǑȌȎƠỜỚỠỞỢỌỘǪǬØǾƆƟꝊꝌ"),
    ("OI", "Ƣ"),
    ("OO", "Ꝏ"),
    ("OU", "Ȣ"),
    ("OE", "\u008cŒ"),
    ("oe", "\u009cœ"),
    ("P", "PⓅＰṔṖƤⱣꝐꝒꝔ"),
    ("Q", "QⓆＱꝖꝘɊ"),
    ("R", "RⓇＲŔṘŘȐȒṚṜŖṞɌⱤꝚꞦꞂ"),
    ("S", "SⓈＳẞŚṤŜṠŠṦṢṨȘŞⱾꞨꞄ"),
    ("T", "TⓉＴṪŤṬȚŢṰṮŦƬƮȾꞆ"),
    ("TZ", "Ꜩ"),
    ("U", "UⓊＵÙÚÛŨṸŪṺŬÜǛǗǕǙỦŮŰǓȔȖƯỪỨỮỬỰỤṲŲṶṴɄ"),
    ("V", "VⓋＶṼṾƲꝞɅ"),
    ("VY", "Ꝡ"),
    ("W", "WⓌＷẀẂŴẆẄẈⱲ"),
    ("X", "XⓍＸẊẌ"),
    ("Y", "YⓎＹỲÝŶỸȲẎŸỶỴƳɎỾ"),
    ("Z", "ZⓏＺŹẐŻŽẒẔƵȤⱿⱫꝢ"),
    ("a", "aⓐａẚàáâầấẫẩãāăằắẵẳȧǡäǟảåǻǎȁȃạậặḁąⱥɐ"),
    ("aa", "ꜳ"),
    ("a", "æǽǣ"),
    ("ao", "ꜵ"),
    ("au", "ꜷ"),
    ("av", "ꜹꜻ"),
    ("ay", "ꜽ"),
    ("b", "bⓑｂḃḅḇƀƃɓþ"),
    ("c", "cⓒｃćĉċčçḉƈȼꜿↄ"),
    ("d", "dⓓｄḋďḍḑḓḏđƌɖɗꝺ"),
    ("dz", "ǳǆ"),
    ("e", "eⓔｅèéêềếễểẽēḕḗĕėëẻěȅȇẹệȩḝęḙḛɇɛǝ"),
    ("f", "fⓕｆḟƒꝼ"),
    ("g", "gⓖｇǵĝḡğġǧģǥɠꞡᵹꝿ"),
    ("h", "hⓗｈĥḣḧȟḥḩḫẖħⱨⱶɥ"),
    ("hv", "ƕ"),
    ("i", "iⓘｉìíîĩīĭïḯỉǐȉȋịįḭɨı"),
    ("j", "jⓙｊĵǰɉ"),
    ("k", "kⓚｋḱǩḳķḵƙⱪꝁꝃꝅꞣ"),
    ("l", "lⓛｌŀĺľḷḹļḽḻſłƚɫⱡꝉꞁꝇ"),
    ("lj", "ǉ"),
    ("m", "mⓜｍḿṁṃɱɯ"),
    ("n", "nⓝｎǹńñṅňṇņṋṉƞɲŉꞑꞥ"),
    ("nj", "ǌ"),
    ("o", "oⓞｏòóôồốỗổõṍȭṏōṑṓŏȯȱöȫỏőǒȍȏơờớỡởợọộǫǭøǿɔꝋꝍɵ"),
    ("oi", "ƣ"),
    ("ou", "ȣ"),
    ("oo", "ꝏ"),
    ("p", "pⓟｐṕṗƥᵽꝑꝓꝕ"),
    ("q", "qⓠｑɋꝗꝙ"),
    ("r", "rⓡｒŕṙřȑȓṛṝŗṟɍɽꝛꞧꞃ"),
    ("s", "sⓢｓßśṥŝṡšṧṣṩșşȿꞩꞅẛ"),
    ("t", "tⓣｔṫẗťṭțţṱṯŧƭʈⱦꞇ"),
    ("tz", "ꜩ"),
    ("u", "uⓤｕùúûũṹūṻŭüǜǘǖǚủůűǔȕȗưừứữửựụṳųṷṵʉ"),
    ("v", "vⓥｖṽṿʋꝟʌ"),
    ("vy", "ꝡ"),
    ("w", "wⓦｗẁẃŵẇẅẘẉⱳ"),
    ("x", "xⓧｘẋẍ"),
    ("y", "yⓨｙỳýŷỹȳẏÿỷẙỵƴɏỿ"),
    ("z", "zⓩｚźẑżžẓẕƶȥɀⱬꝣ"),
)


def _build_table() -> Dict[int, Fold]:
    table: Dict[int, Fold] = {}
    for replacement, chars in _FOLD_ROWS:
        fold = Fold(FoldKind.LITERAL, replacement)
        for ch in chars:
            table.setdefault(ord(ch), fold)
    return table


FOLD_TABLE: Dict[int, Fold] = _build_table()

_SILENT = Fold(FoldKind.SILENT)
_HYPHEN = Fold(FoldKind.HYPHEN, "-")
_UNRECOGNIZED = Fold(FoldKind.UNRECOGNIZED)


def _is_combining(scalar: int) -> bool:
    return any(lo <= scalar <= hi for lo, hi in COMBINING_RANGES)


def lookup(scalar: Optional[int]) -> Fold:
    """Return the fold action for ``scalar``; ``None`` (undecodable) is unrecognized."""
    if scalar is None:
        return _UNRECOGNIZED
    fold = FOLD_TABLE.get(scalar)
    if fold is not None:
        return fold
    if scalar == EN_DASH:
        return _HYPHEN
    if _is_combining(scalar):
        return _SILENT
    return _UNRECOGNIZED
