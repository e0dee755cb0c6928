"""Built-in spell corrections for romanised input.

Each table maps a common misspelling of a romanised word to the spelling that converts well to the
language's script. Keys are single lower-case words; values may be several words. Keys are
canonical language names from the language registry.
"""

from __future__ import annotations

from typing import Final

__all__: list[str] = ["ROMAN_CORRECTIONS"]

ROMAN_CORRECTIONS: Final[dict[str, dict[str, str]]] = {
    "hindi": {
        "namste": "namaste", "namestey": "namaste", "namasthe": "namaste", "namaskaar": "namaskar",
        "dhanyvaad": "dhanyavaad", "dhanyawad": "dhanyavaad", "dhanyabad": "dhanyavaad",
        "sukria": "shukriya", "acha": "accha", "thik": "theek", "teek": "theek", "kese": "kaise",
        "kaisey": "kaise", "kyun": "kyon", "kiyu": "kyon", "kyo": "kyon", "han": "haan",
        "nahi": "nahin", "nai": "nahin", "mein": "main", "mai": "main", "hum": "ham", "ap": "aap",
        "yeh": "yah", "ye": "yah", "woh": "vah", "wo": "vah", "vo": "vah", "karunga": "karoonga",
        "jayenge": "jaayenge", "jaenge": "jaayenge", "ayega": "aayega", "sunlo": "sun lo",
        "pyar": "pyaar", "dosth": "dost",
    },
    "telugu": {
        "namaskaramulu": "namaskaralu", "elunnaru": "ela unnaru", "bagunnara": "baagunnaaraa",
        "bagunara": "baagunnaaraa", "bagundi": "baagundi", "bagundhi": "baagundi",
        "dhanyavadalu": "dhanyavaadaalu", "dhanyavadamulu": "dhanyavaadaalu", "neenu": "nenu",
        "miru": "meeru", "endkuu": "enduku", "avnu": "avunu", "kadhu": "kaadu", "kadu": "kaadu",
        "kaadhu": "kaadu", "vellipotha": "vellipotaanu", "randi": "raandi", "vacchindi": "vachindi",
        "chestunna": "chestunnaanu", "chestuna": "chestunnaanu", "chepandi": "cheppandi",
        "chudu": "choodu", "chodu": "choodu", "premainchaanu": "preminchanu",
    },
    "tamil": {
        "vanakam": "vanakkam", "nanri": "nandri", "epdi": "eppadi", "nala": "nalla",
        "iruken": "irukken", "irukireen": "irukkireen", "nan": "naan", "ninga": "neenga",
        "ena": "enna", "yenna": "enna", "yen": "yaen", "amam": "aamaam", "illa": "illai",
        "ile": "illai", "vanthen": "vandhen", "poom": "povom", "kadhal": "kaadhal",
    },
    "kannada": {
        "namaskaar": "namaskara", "hegiddeeraa": "hegiddira", "chenagidini": "chennagiddini",
        "dhanyavadagalu": "dhanyavaadagalu", "nanu": "naanu", "nenu": "neenu", "nivu": "neevu",
        "yake": "yaake", "houdu": "howdu", "ila": "illa", "madu": "maadu", "noodu": "nodu",
        "priti": "preeti",
    },
    "malayalam": {
        "namaskkaram": "namaskkaaram", "namaskaram": "namaskkaaram", "sugamano": "sughamano",
        "nandi": "nandhi", "njan": "njaan", "nigal": "ningal", "entu": "enthu", "enta": "enthaa",
        "ala": "alla", "va": "vaa", "po": "poo", "cheyu": "cheyyu", "kanu": "kaanu",
        "snheam": "sneham",
    },
    "bengali": {
        "nomoskar": "namaskar", "namaskaar": "namaskar", "kamon": "kemon", "bhalo": "bhaalo",
        "balo": "bhaalo", "dhonnobad": "dhanyabaad", "dhanyabad": "dhanyabaad", "ami": "aami",
        "apni": "aapni", "aponi": "aapni", "kano": "keno", "han": "haan", "na": "naa",
        "eso": "esho", "bhalobasha": "bhalobasa",
    },
    "gujarati": {
        "namstey": "namaste", "kemcho": "kem cho", "majama": "majaamaa", "aabhar": "aabhaar",
        "abhar": "aabhaar", "hu": "hun", "tamey": "tame", "ha": "haa", "na": "naa", "avo": "aavo",
        "preema": "prem",
    },
    "punjabi": {
        "satsriakaal": "sat sri akaal", "kidaan": "ki haal", "vadia": "vadiya",
        "dhanyavad": "dhanyavaad", "mai": "main", "tusi": "tussi", "kiun": "kyon",
        "haan": "haanjee", "haanji": "haanjee", "nahi": "naheen", "nahin": "naheen",
        "pyar": "pyaar",
    },
    "odia": {
        "namaskaar": "namaskar", "kemti": "kemiti", "bala": "bhala", "dhanyabad": "dhanyabaad",
        "aachi": "achi", "han": "haan", "na": "naa", "ja": "jaa",
    },
    "marathi": {
        "namaskaar": "namaskar", "kasaa": "kasa", "changale": "changle", "dhanyawad": "dhanyavaad",
        "ahe": "aahe", "hoy": "ho", "nahi": "naahi", "ya": "yaa", "ja": "jaa",
    },
    "nepali": {
        "namasthe": "namaste", "kasri": "kasari", "ramrao": "ramro", "dhanyabad": "dhanyabaad",
        "tapai": "tapaain", "cha": "chha", "hoy": "ho", "haina": "hoina", "aau": "aaunos",
        "jau": "jaanos",
    },
    "urdu": {
        "assalam": "assalaamu", "assalamualaikum": "assalaamu alaikum", "sukria": "shukriya",
        "acha": "accha", "thik": "theek", "mein": "main", "ap": "aap", "ji": "jee",
        "nahi": "naheen", "walaikum": "wa alaikum",
    },
    "assamese": {
        "namaskaar": "namaskar", "kenea": "kene", "bhal": "bhaal", "dhanyabad": "dhanyabaad",
        "ase": "aase", "nahoi": "nohoi", "ahok": "aahok",
    },
    "sinhala": {
        "ayubowan": "aayubowan", "komada": "kohomada", "hodi": "hodai", "istuti": "isthuthi",
        "thiyenawa": "thiyenava", "innawa": "innava", "ne": "nehe",
    },
}
