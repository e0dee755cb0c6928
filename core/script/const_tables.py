"""Latin-to-native transliteration tables.

Brahmic tables map the inherent vowel 'a' to an empty modifier, so a consonant followed by 'a'
keeps its inherent vowel. Conjuncts exist only where a table lists them (e.g. 'x', 'tr', 'gn').
Tables are keyed by name; languages reach them through their script family, or through
LANGUAGE_TABLES when the family spans several writing systems (CJK).
"""

from __future__ import annotations

from typing import Final

from models.language_models import ScriptBlock

__all__: list[str] = ["LANGUAGE_TABLES", "SCRIPT_BLOCKS"]

DEVANAGARI: Final[ScriptBlock] = ScriptBlock(
    name="Devanagari",
    virama="्",
    vowels={
        "a": "अ", "aa": "आ", "i": "इ", "ii": "ई", "ee": "ई",
        "u": "उ", "uu": "ऊ", "oo": "ऊ", "e": "ए", "ai": "ऐ",
        "o": "ओ", "au": "औ",
    },
    consonants={
        "k": "क", "kh": "ख", "g": "ग", "gh": "घ", "ng": "ङ",
        "ch": "च", "chh": "छ", "j": "ज", "jh": "झ", "ny": "ञ",
        "tt": "ट", "tth": "ठ", "dd": "ड", "ddh": "ढ", "nn": "ण",
        "t": "त", "th": "थ", "d": "द", "dh": "ध", "n": "न",
        "p": "प", "ph": "फ", "f": "फ", "b": "ब", "bh": "भ", "m": "म",
        "y": "य", "r": "र", "l": "ल", "v": "व", "w": "व",
        "sh": "श", "shh": "ष", "s": "स", "h": "ह",
        "x": "क्ष", "tr": "त्र", "gn": "ज्ञ", "q": "क़", "z": "ज़",
    },
    modifiers={
        "a": "", "aa": "ा", "i": "ि", "ii": "ी", "ee": "ी",
        "u": "ु", "uu": "ू", "oo": "ू", "e": "े", "ai": "ै",
        "o": "ो", "au": "ौ",
    },
)

TELUGU: Final[ScriptBlock] = ScriptBlock(
    name="Telugu",
    virama="్",
    vowels={
        "a": "అ", "aa": "ఆ", "i": "ఇ", "ii": "ఈ", "ee": "ఈ",
        "u": "ఉ", "uu": "ఊ", "oo": "ఊ", "e": "ఎ", "ai": "ఐ",
        "o": "ఒ", "au": "ఔ",
    },
    consonants={
        "k": "క", "kh": "ఖ", "g": "గ", "gh": "ఘ", "ng": "ఙ",
        "ch": "చ", "chh": "ఛ", "j": "జ", "jh": "ఝ", "ny": "ఞ",
        "tt": "ట", "tth": "ఠ", "dd": "డ", "ddh": "ఢ", "nn": "ణ",
        "t": "త", "th": "థ", "d": "ద", "dh": "ధ", "n": "న",
        "p": "ప", "ph": "ఫ", "f": "ఫ", "b": "బ", "bh": "భ", "m": "మ",
        "y": "య", "r": "ర", "l": "ల", "v": "వ", "w": "వ",
        "sh": "శ", "shh": "ష", "s": "స", "h": "హ",
        "x": "క్ష", "tr": "త్ర", "gn": "జ్ఞ", "q": "క", "z": "జ",
    },
    modifiers={
        "a": "", "aa": "ా", "i": "ి", "ii": "ీ", "ee": "ీ",
        "u": "ు", "uu": "ూ", "oo": "ూ", "e": "ె", "ai": "ై",
        "o": "ొ", "au": "ౌ",
    },
)

TAMIL: Final[ScriptBlock] = ScriptBlock(
    name="Tamil",
    virama="்",
    vowels={
        "a": "அ", "aa": "ஆ", "i": "இ", "ii": "ஈ", "ee": "ஈ",
        "u": "உ", "uu": "ஊ", "oo": "ஊ", "e": "எ", "ai": "ஐ",
        "o": "ஒ", "au": "ஔ",
    },
    consonants={
        "k": "க", "g": "க", "ng": "ங",
        "ch": "ச", "j": "ஜ", "s": "ச", "ny": "ஞ",
        "tt": "ட", "dd": "ட", "nn": "ண",
        "t": "த", "d": "த", "n": "ந",
        "p": "ப", "b": "ப", "f": "ப", "m": "ம",
        "y": "ய", "r": "ர", "l": "ல", "v": "வ", "w": "வ",
        "zh": "ழ", "sh": "ஷ", "h": "ஹ",
        "x": "க்ஷ", "z": "ஜ", "q": "க",
    },
    modifiers={
        "a": "", "aa": "ா", "i": "ி", "ii": "ீ", "ee": "ீ",
        "u": "ு", "uu": "ூ", "oo": "ூ", "e": "ெ", "ai": "ை",
        "o": "ொ", "au": "ௌ",
    },
)

KANNADA: Final[ScriptBlock] = ScriptBlock(
    name="Kannada",
    virama="್",
    vowels={
        "a": "ಅ", "aa": "ಆ", "i": "ಇ", "ii": "ಈ", "ee": "ಈ",
        "u": "ಉ", "uu": "ಊ", "oo": "ಊ", "e": "ಎ", "ai": "ಐ",
        "o": "ಒ", "au": "ಔ",
    },
    consonants={
        "k": "ಕ", "kh": "ಖ", "g": "ಗ", "gh": "ಘ", "ng": "ಙ",
        "ch": "ಚ", "chh": "ಛ", "j": "ಜ", "jh": "ಝ", "ny": "ಞ",
        "tt": "ಟ", "tth": "ಠ", "dd": "ಡ", "ddh": "ಢ", "nn": "ಣ",
        "t": "ತ", "th": "ಥ", "d": "ದ", "dh": "ಧ", "n": "ನ",
        "p": "ಪ", "ph": "ಫ", "f": "ಫ", "b": "ಬ", "bh": "ಭ", "m": "ಮ",
        "y": "ಯ", "r": "ರ", "l": "ಲ", "v": "ವ", "w": "ವ",
        "sh": "ಶ", "shh": "ಷ", "s": "ಸ", "h": "ಹ",
        "x": "ಕ್ಷ", "tr": "ತ್ರ", "gn": "ಜ್ಞ", "q": "ಕ", "z": "ಜ",
    },
    modifiers={
        "a": "", "aa": "ಾ", "i": "ಿ", "ii": "ೀ", "ee": "ೀ",
        "u": "ು", "uu": "ೂ", "oo": "ೂ", "e": "ೆ", "ai": "ೈ",
        "o": "ೊ", "au": "ೌ",
    },
)

MALAYALAM: Final[ScriptBlock] = ScriptBlock(
    name="Malayalam",
    virama="്",
    vowels={
        "a": "അ", "aa": "ആ", "i": "ഇ", "ii": "ഈ", "ee": "ഈ",
        "u": "ഉ", "uu": "ഊ", "oo": "ഊ", "e": "എ", "ai": "ഐ",
        "o": "ഒ", "au": "ഔ",
    },
    consonants={
        "k": "ക", "kh": "ഖ", "g": "ഗ", "gh": "ഘ", "ng": "ങ",
        "ch": "ച", "chh": "ഛ", "j": "ജ", "jh": "ഝ", "ny": "ഞ",
        "tt": "ട", "tth": "ഠ", "dd": "ഡ", "ddh": "ഢ", "nn": "ണ",
        "t": "ത", "th": "ഥ", "d": "ദ", "dh": "ധ", "n": "ന",
        "p": "പ", "ph": "ഫ", "f": "ഫ", "b": "ബ", "bh": "ഭ", "m": "മ",
        "y": "യ", "r": "ര", "l": "ല", "v": "വ", "w": "വ",
        "sh": "ശ", "shh": "ഷ", "s": "സ", "h": "ഹ", "zh": "ഴ",
        "x": "ക്ഷ", "tr": "ത്ര", "gn": "ജ്ഞ", "q": "ക", "z": "ജ",
    },
    modifiers={
        "a": "", "aa": "ാ", "i": "ി", "ii": "ീ", "ee": "ീ",
        "u": "ു", "uu": "ൂ", "oo": "ൂ", "e": "െ", "ai": "ൈ",
        "o": "ൊ", "au": "ൌ",
    },
)

BENGALI: Final[ScriptBlock] = ScriptBlock(
    name="Bengali",
    virama="্",
    vowels={
        "a": "অ", "aa": "আ", "i": "ই", "ii": "ঈ", "ee": "ঈ",
        "u": "উ", "uu": "ঊ", "oo": "ঊ", "e": "এ", "ai": "ঐ",
        "o": "ও", "au": "ঔ",
    },
    consonants={
        "k": "ক", "kh": "খ", "g": "গ", "gh": "ঘ", "ng": "ঙ",
        "ch": "চ", "chh": "ছ", "j": "জ", "jh": "ঝ", "ny": "ঞ",
        "tt": "ট", "tth": "ঠ", "dd": "ড", "ddh": "ঢ", "nn": "ণ",
        "t": "ত", "th": "থ", "d": "দ", "dh": "ধ", "n": "ন",
        "p": "প", "ph": "ফ", "f": "ফ", "b": "ব", "bh": "ভ", "m": "ম",
        "y": "য", "r": "র", "l": "ল", "v": "ভ", "w": "ও",
        "sh": "শ", "shh": "ষ", "s": "স", "h": "হ",
        "x": "ক্ষ", "tr": "ত্র", "gn": "জ্ঞ", "q": "ক", "z": "জ",
    },
    modifiers={
        "a": "", "aa": "া", "i": "ি", "ii": "ী", "ee": "ী",
        "u": "ু", "uu": "ূ", "oo": "ূ", "e": "ে", "ai": "ৈ",
        "o": "ো", "au": "ৌ",
    },
)

GUJARATI: Final[ScriptBlock] = ScriptBlock(
    name="Gujarati",
    virama="્",
    vowels={
        "a": "અ", "aa": "આ", "i": "ઇ", "ii": "ઈ", "ee": "ઈ",
        "u": "ઉ", "uu": "ઊ", "oo": "ઊ", "e": "એ", "ai": "ઐ",
        "o": "ઓ", "au": "ઔ",
    },
    consonants={
        "k": "ક", "kh": "ખ", "g": "ગ", "gh": "ઘ", "ng": "ઙ",
        "ch": "ચ", "chh": "છ", "j": "જ", "jh": "ઝ", "ny": "ઞ",
        "tt": "ટ", "tth": "ઠ", "dd": "ડ", "ddh": "ઢ", "nn": "ણ",
        "t": "ત", "th": "થ", "d": "દ", "dh": "ધ", "n": "ન",
        "p": "પ", "ph": "ફ", "f": "ફ", "b": "બ", "bh": "ભ", "m": "મ",
        "y": "ય", "r": "ર", "l": "લ", "v": "વ", "w": "વ",
        "sh": "શ", "shh": "ષ", "s": "સ", "h": "હ",
        "x": "ક્ષ", "tr": "ત્ર", "gn": "જ્ઞ", "q": "ક", "z": "જ",
    },
    modifiers={
        "a": "", "aa": "ા", "i": "િ", "ii": "ી", "ee": "ી",
        "u": "ુ", "uu": "ૂ", "oo": "ૂ", "e": "ે", "ai": "ૈ",
        "o": "ો", "au": "ૌ",
    },
)

GURMUKHI: Final[ScriptBlock] = ScriptBlock(
    name="Gurmukhi",
    virama="੍",
    vowels={
        "a": "ਅ", "aa": "ਆ", "i": "ਇ", "ii": "ਈ", "ee": "ਈ",
        "u": "ਉ", "uu": "ਊ", "oo": "ਊ", "e": "ਏ", "ai": "ਐ",
        "o": "ਓ", "au": "ਔ",
    },
    consonants={
        "k": "ਕ", "kh": "ਖ", "g": "ਗ", "gh": "ਘ", "ng": "ਙ",
        "ch": "ਚ", "chh": "ਛ", "j": "ਜ", "jh": "ਝ", "ny": "ਞ",
        "tt": "ਟ", "tth": "ਠ", "dd": "ਡ", "ddh": "ਢ", "nn": "ਣ",
        "t": "ਤ", "th": "ਥ", "d": "ਦ", "dh": "ਧ", "n": "ਨ",
        "p": "ਪ", "ph": "ਫ", "f": "ਫ", "b": "ਬ", "bh": "ਭ", "m": "ਮ",
        "y": "ਯ", "r": "ਰ", "l": "ਲ", "v": "ਵ", "w": "ਵ",
        "sh": "ਸ਼", "s": "ਸ", "h": "ਹ",
        "x": "ਕ੍ਸ਼", "z": "ਜ਼", "q": "ਕ",
    },
    modifiers={
        "a": "", "aa": "ਾ", "i": "ਿ", "ii": "ੀ", "ee": "ੀ",
        "u": "ੁ", "uu": "ੂ", "oo": "ੂ", "e": "ੇ", "ai": "ੈ",
        "o": "ੋ", "au": "ੌ",
    },
)

ODIA: Final[ScriptBlock] = ScriptBlock(
    name="Odia",
    virama="୍",
    vowels={
        "a": "ଅ", "aa": "ଆ", "i": "ଇ", "ii": "ଈ", "ee": "ଈ",
        "u": "ଉ", "uu": "ଊ", "oo": "ଊ", "e": "ଏ", "ai": "ଐ",
        "o": "ଓ", "au": "ଔ",
    },
    consonants={
        "k": "କ", "kh": "ଖ", "g": "ଗ", "gh": "ଘ", "ng": "ଙ",
        "ch": "ଚ", "chh": "ଛ", "j": "ଜ", "jh": "ଝ", "ny": "ଞ",
        "tt": "ଟ", "tth": "ଠ", "dd": "ଡ", "ddh": "ଢ", "nn": "ଣ",
        "t": "ତ", "th": "ଥ", "d": "ଦ", "dh": "ଧ", "n": "ନ",
        "p": "ପ", "ph": "ଫ", "f": "ଫ", "b": "ବ", "bh": "ଭ", "m": "ମ",
        "y": "ଯ", "r": "ର", "l": "ଲ", "v": "ୱ", "w": "ୱ",
        "sh": "ଶ", "shh": "ଷ", "s": "ସ", "h": "ହ",
        "x": "କ୍ଷ", "tr": "ତ୍ର", "gn": "ଜ୍ଞ", "q": "କ", "z": "ଜ",
    },
    modifiers={
        "a": "", "aa": "ା", "i": "ି", "ii": "ୀ", "ee": "ୀ",
        "u": "ୁ", "uu": "ୂ", "oo": "ୂ", "e": "େ", "ai": "ୈ",
        "o": "ୋ", "au": "ୌ",
    },
)

ARABIC: Final[ScriptBlock] = ScriptBlock(
    name="Arabic",
    vowels={
        "a": "ا", "aa": "آ", "i": "إ", "ii": "ي", "ee": "ي",
        "u": "أ", "uu": "و", "oo": "و", "e": "ي", "ai": "ي",
        "o": "و", "au": "و",
    },
    consonants={
        "b": "ب", "t": "ت", "th": "ث", "j": "ج", "h": "ح", "kh": "خ",
        "d": "د", "dh": "ذ", "r": "ر", "z": "ز", "s": "س", "sh": "ش",
        "ss": "ص", "dd": "ض", "tt": "ط", "zz": "ظ", "gh": "غ",
        "f": "ف", "q": "ق", "k": "ك", "l": "ل", "m": "م", "n": "ن",
        "w": "و", "y": "ي", "v": "ف", "p": "ب", "g": "غ", "x": "كس",
        "ch": "تش",
    },
)

THAI: Final[ScriptBlock] = ScriptBlock(
    name="Thai",
    vowels={
        "a": "อ", "aa": "อา", "i": "อิ", "ii": "อี", "ee": "อี",
        "u": "อุ", "uu": "อู", "oo": "อู", "e": "เอ", "ai": "ไอ",
        "o": "โอ", "au": "เอา",
    },
    consonants={
        "k": "ก", "kh": "ข", "g": "ก", "ng": "ง",
        "ch": "ช", "j": "จ", "s": "ส", "ny": "ญ",
        "t": "ต", "th": "ท", "d": "ด", "n": "น",
        "p": "ป", "ph": "พ", "f": "ฟ", "b": "บ", "m": "ม",
        "y": "ย", "r": "ร", "l": "ล", "w": "ว", "v": "ว",
        "h": "ห", "x": "กซ", "z": "ซ", "q": "ก",
    },
)

CYRILLIC: Final[ScriptBlock] = ScriptBlock(
    name="Cyrillic",
    vowels={
        "a": "а", "e": "е", "i": "и", "o": "о", "u": "у",
        "y": "ы", "yo": "ё", "ya": "я", "yu": "ю", "ye": "е",
    },
    consonants={
        "b": "б", "v": "в", "g": "г", "d": "д", "zh": "ж", "z": "з",
        "k": "к", "l": "л", "m": "м", "n": "н", "p": "п", "r": "р",
        "s": "с", "t": "т", "f": "ф", "kh": "х", "ts": "ц", "ch": "ч",
        "sh": "ш", "shch": "щ", "j": "й", "w": "в", "h": "х", "x": "кс",
        "q": "к", "c": "ц",
    },
)

GREEK: Final[ScriptBlock] = ScriptBlock(
    name="Greek",
    vowels={
        "a": "α", "e": "ε", "i": "ι", "o": "ο", "u": "υ",
        "ee": "η", "oo": "ω",
    },
    consonants={
        "b": "β", "g": "γ", "d": "δ", "z": "ζ", "th": "θ",
        "k": "κ", "l": "λ", "m": "μ", "n": "ν", "x": "ξ",
        "p": "π", "r": "ρ", "s": "σ", "t": "τ", "f": "φ",
        "ch": "χ", "ps": "ψ", "v": "β", "w": "ω", "h": "η",
        "j": "ι", "q": "κ", "c": "κ",
    },
)

HEBREW: Final[ScriptBlock] = ScriptBlock(
    name="Hebrew",
    vowels={
        "a": "א", "e": "א", "i": "י", "o": "ו", "u": "ו",
    },
    consonants={
        "b": "ב", "g": "ג", "d": "ד", "h": "ה", "v": "ו", "w": "ו",
        "z": "ז", "ch": "ח", "t": "ט", "y": "י", "k": "כ", "kh": "ח",
        "l": "ל", "m": "מ", "n": "נ", "s": "ס", "p": "פ", "f": "פ",
        "ts": "צ", "q": "ק", "r": "ר", "sh": "ש", "j": "ג", "x": "קס",
    },
)

# Hiragana: consonant keys are whole syllables
KANA: Final[ScriptBlock] = ScriptBlock(
    name="Kana",
    vowels={
        "a": "あ", "i": "い", "u": "う", "e": "え", "o": "お",
    },
    consonants={
        "ka": "か", "ki": "き", "ku": "く", "ke": "け", "ko": "こ",
        "sa": "さ", "shi": "し", "su": "す", "se": "せ", "so": "そ",
        "ta": "た", "chi": "ち", "tsu": "つ", "te": "て", "to": "と",
        "na": "な", "ni": "に", "nu": "ぬ", "ne": "ね", "no": "の",
        "ha": "は", "hi": "ひ", "fu": "ふ", "he": "へ", "ho": "ほ",
        "ma": "ま", "mi": "み", "mu": "む", "me": "め", "mo": "も",
        "ya": "や", "yu": "ゆ", "yo": "よ",
        "ra": "ら", "ri": "り", "ru": "る", "re": "れ", "ro": "ろ",
        "wa": "わ", "wo": "を", "n": "ん",
        "ga": "が", "gi": "ぎ", "gu": "ぐ", "ge": "げ", "go": "ご",
        "za": "ざ", "ji": "じ", "zu": "ず", "ze": "ぜ", "zo": "ぞ",
        "da": "だ", "di": "ぢ", "du": "づ", "de": "で", "do": "ど",
        "ba": "ば", "bi": "び", "bu": "ぶ", "be": "べ", "bo": "ぼ",
        "pa": "ぱ", "pi": "ぴ", "pu": "ぷ", "pe": "ぺ", "po": "ぽ",
    },
)

SCRIPT_BLOCKS: Final[tuple[ScriptBlock, ...]] = (
    DEVANAGARI,
    BENGALI,
    GURMUKHI,
    GUJARATI,
    ODIA,
    TAMIL,
    TELUGU,
    KANNADA,
    MALAYALAM,
    ARABIC,
    HEBREW,
    THAI,
    CYRILLIC,
    GREEK,
    KANA,
)

# Languages whose table is not named after their script family
LANGUAGE_TABLES: Final[dict[str, str]] = {
    "japanese": "Kana",
}
