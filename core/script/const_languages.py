"""Static language data.

Rows are (name, code, native name, script family, direction). Aliases are resolved after
canonical names and codes; 3-letter codes are listed only where they differ from the row code.
"""

from __future__ import annotations

from typing import Final

__all__: list[str] = [
    "DEFAULT_LANGUAGE",
    "DIALECT_FALLBACKS",
    "LANGUAGE_ALIASES",
    "LANGUAGE_ROWS",
]

DEFAULT_LANGUAGE: Final[str] = "english"

LANGUAGE_ROWS: Final[tuple[tuple[str, str, str, str, str], ...]] = (
    # Major world languages
    ("english", "en", "English", "Latin", "ltr"),
    ("chinese", "zh", "中文", "CJK", "ltr"),
    ("chinese_traditional", "zt", "繁體中文", "CJK", "ltr"),
    ("spanish", "es", "Español", "Latin", "ltr"),
    ("arabic", "ar", "العربية", "Arabic", "rtl"),
    ("french", "fr", "Français", "Latin", "ltr"),
    ("portuguese", "pt", "Português", "Latin", "ltr"),
    ("russian", "ru", "Русский", "Cyrillic", "ltr"),
    ("japanese", "ja", "日本語", "CJK", "ltr"),
    ("german", "de", "Deutsch", "Latin", "ltr"),
    ("korean", "ko", "한국어", "CJK", "ltr"),
    # South Asia
    ("hindi", "hi", "हिंदी", "Devanagari", "ltr"),
    ("bengali", "bn", "বাংলা", "Bengali", "ltr"),
    ("telugu", "te", "తెలుగు", "Telugu", "ltr"),
    ("marathi", "mr", "मराठी", "Devanagari", "ltr"),
    ("tamil", "ta", "தமிழ்", "Tamil", "ltr"),
    ("gujarati", "gu", "ગુજરાતી", "Gujarati", "ltr"),
    ("kannada", "kn", "ಕನ್ನಡ", "Kannada", "ltr"),
    ("malayalam", "ml", "മലയാളം", "Malayalam", "ltr"),
    ("punjabi", "pa", "ਪੰਜਾਬੀ", "Gurmukhi", "ltr"),
    ("odia", "or", "ଓଡ଼ିଆ", "Odia", "ltr"),
    ("urdu", "ur", "اردو", "Arabic", "rtl"),
    ("assamese", "as", "অসমীয়া", "Bengali", "ltr"),
    ("nepali", "ne", "नेपाली", "Devanagari", "ltr"),
    ("sinhala", "si", "සිංහල", "Sinhala", "ltr"),
    ("maithili", "mai", "मैथिली", "Devanagari", "ltr"),
    ("kashmiri", "ks", "کٲشُر", "Arabic", "rtl"),
    ("konkani", "kok", "कोंकणी", "Devanagari", "ltr"),
    ("sindhi", "sd", "سنڌي", "Arabic", "rtl"),
    ("dogri", "doi", "डोगरी", "Devanagari", "ltr"),
    ("manipuri", "mni", "মৈতৈলোন্", "Bengali", "ltr"),
    ("sanskrit", "sa", "संस्कृतम्", "Devanagari", "ltr"),
    ("bhojpuri", "bho", "भोजपुरी", "Devanagari", "ltr"),
    ("awadhi", "awa", "अवधी", "Devanagari", "ltr"),
    ("tibetan", "bo", "བོད་སྐད་", "Tibetan", "ltr"),
    ("tulu", "tcy", "ತುಳು", "Kannada", "ltr"),
    ("bodo", "brx", "बड़ो", "Devanagari", "ltr"),
    # South-East Asia
    ("thai", "th", "ไทย", "Thai", "ltr"),
    ("vietnamese", "vi", "Tiếng Việt", "Latin", "ltr"),
    ("indonesian", "id", "Bahasa Indonesia", "Latin", "ltr"),
    ("malay", "ms", "Bahasa Melayu", "Latin", "ltr"),
    ("tagalog", "tl", "Tagalog", "Latin", "ltr"),
    ("burmese", "my", "မြန်မာ", "Myanmar", "ltr"),
    ("khmer", "km", "ខ្មែរ", "Khmer", "ltr"),
    ("lao", "lo", "ລາວ", "Lao", "ltr"),
    ("javanese", "jv", "Basa Jawa", "Latin", "ltr"),
    ("sundanese", "su", "Basa Sunda", "Latin", "ltr"),
    ("cebuano", "ceb", "Cebuano", "Latin", "ltr"),
    # Middle East and Central Asia
    ("persian", "fa", "فارسی", "Arabic", "rtl"),
    ("turkish", "tr", "Türkçe", "Latin", "ltr"),
    ("hebrew", "he", "עברית", "Hebrew", "rtl"),
    ("kurdish", "ku", "Kurdî", "Latin", "ltr"),
    ("pashto", "ps", "پښتو", "Arabic", "rtl"),
    ("azerbaijani", "az", "Azərbaycan", "Latin", "ltr"),
    ("uzbek", "uz", "O'zbek", "Latin", "ltr"),
    ("kazakh", "kk", "Қазақ", "Cyrillic", "ltr"),
    ("kyrgyz", "ky", "Кыргыз", "Cyrillic", "ltr"),
    ("tajik", "tg", "Тоҷикӣ", "Cyrillic", "ltr"),
    ("uighur", "ug", "ئۇيغۇرچە", "Arabic", "rtl"),
    # Europe
    ("italian", "it", "Italiano", "Latin", "ltr"),
    ("dutch", "nl", "Nederlands", "Latin", "ltr"),
    ("polish", "pl", "Polski", "Latin", "ltr"),
    ("ukrainian", "uk", "Українська", "Cyrillic", "ltr"),
    ("czech", "cs", "Čeština", "Latin", "ltr"),
    ("romanian", "ro", "Română", "Latin", "ltr"),
    ("hungarian", "hu", "Magyar", "Latin", "ltr"),
    ("swedish", "sv", "Svenska", "Latin", "ltr"),
    ("danish", "da", "Dansk", "Latin", "ltr"),
    ("finnish", "fi", "Suomi", "Latin", "ltr"),
    ("norwegian", "no", "Norsk", "Latin", "ltr"),
    ("greek", "el", "Ελληνικά", "Greek", "ltr"),
    ("bulgarian", "bg", "Български", "Cyrillic", "ltr"),
    ("croatian", "hr", "Hrvatski", "Latin", "ltr"),
    ("serbian", "sr", "Српски", "Cyrillic", "ltr"),
    ("slovak", "sk", "Slovenčina", "Latin", "ltr"),
    ("belarusian", "be", "Беларуская", "Cyrillic", "ltr"),
    ("macedonian", "mk", "Македонски", "Cyrillic", "ltr"),
    ("catalan", "ca", "Català", "Latin", "ltr"),
    # Caucasus
    ("georgian", "ka", "ქართული", "Georgian", "ltr"),
    ("armenian", "hy", "Հայերեն", "Armenian", "ltr"),
    # Africa
    ("swahili", "sw", "Kiswahili", "Latin", "ltr"),
    ("amharic", "am", "አማርኛ", "Ethiopic", "ltr"),
    ("tigrinya", "ti", "ትግርኛ", "Ethiopic", "ltr"),
    ("yoruba", "yo", "Yorùbá", "Latin", "ltr"),
    ("igbo", "ig", "Igbo", "Latin", "ltr"),
    ("hausa", "ha", "Hausa", "Latin", "ltr"),
    ("zulu", "zu", "isiZulu", "Latin", "ltr"),
    ("afrikaans", "af", "Afrikaans", "Latin", "ltr"),
    ("somali", "so", "Soomaali", "Latin", "ltr"),
    # Other
    ("mongolian", "mn", "Монгол", "Cyrillic", "ltr"),
    ("yiddish", "yi", "ייִדיש", "Hebrew", "rtl"),
)

LANGUAGE_ALIASES: Final[dict[str, str]] = {
    # Alternate names and spellings
    "bangla": "bengali",
    "oriya": "odia",
    "farsi": "persian",
    "mandarin": "chinese",
    "cantonese": "chinese",
    "taiwanese": "chinese_traditional",
    "panjabi": "punjabi",
    "sinhalese": "sinhala",
    "myanmar": "burmese",
    "filipino": "tagalog",
    "brazilian": "portuguese",
    "mexican": "spanish",
    "flemish": "dutch",
    "hindustani": "hindi",
    "uyghur": "uighur",
    # ISO 639-2/3 codes
    "eng": "english",
    "zho": "chinese",
    "spa": "spanish",
    "ara": "arabic",
    "fra": "french",
    "por": "portuguese",
    "rus": "russian",
    "jpn": "japanese",
    "deu": "german",
    "kor": "korean",
    "hin": "hindi",
    "ben": "bengali",
    "tel": "telugu",
    "mar": "marathi",
    "tam": "tamil",
    "guj": "gujarati",
    "kan": "kannada",
    "mal": "malayalam",
    "pan": "punjabi",
    "ori": "odia",
    "ory": "odia",
    "urd": "urdu",
    "asm": "assamese",
    "nep": "nepali",
    "sin": "sinhala",
    "tha": "thai",
    "vie": "vietnamese",
    "ind": "indonesian",
    "msa": "malay",
    "tgl": "tagalog",
    "fil": "tagalog",
    "mya": "burmese",
    "fas": "persian",
    "tur": "turkish",
    "heb": "hebrew",
    "ita": "italian",
    "nld": "dutch",
    "pol": "polish",
    "ukr": "ukrainian",
    "ell": "greek",
    "swa": "swahili",
    "amh": "amharic",
}

# Dialects without their own phrase dictionary, mapped to the language whose dictionary serves them
DIALECT_FALLBACKS: Final[dict[str, str]] = {
    "bhojpuri": "hindi",
    "maithili": "hindi",
    "awadhi": "hindi",
    "dogri": "hindi",
    "bodo": "hindi",
    "sanskrit": "hindi",
    "konkani": "marathi",
    "manipuri": "bengali",
    "tulu": "kannada",
    "kashmiri": "urdu",
    "sindhi": "urdu",
    "chinese_traditional": "chinese",
}
