"""Built-in phrase dictionaries.

Each dictionary maps a native phrase to its English meaning. Keys are canonical language names
from the language registry. Reverse (English to native) dictionaries are derived at start-up,
the first native phrase for an English meaning wins.
"""

from __future__ import annotations

from typing import Final

__all__: list[str] = ["PHRASES_TO_ENGLISH"]

PHRASES_TO_ENGLISH: Final[dict[str, dict[str, str]]] = {
    "hindi": {
        "नमस्ते": "hello", "धन्यवाद": "thank you", "हाँ": "yes", "नहीं": "no",
        "कृपया": "please", "माफ़ करें": "sorry", "शुभ प्रभात": "good morning",
        "शुभ रात्रि": "good night", "कैसे हो": "how are you", "मैं ठीक हूँ": "i am fine",
        "आप कहाँ हैं": "where are you", "क्या हाल है": "how are you",
        "मुझे पसंद है": "i like", "बहुत अच्छा": "very good", "मिलकर खुशी हुई": "nice to meet you",
        "फिर मिलेंगे": "see you again", "अलविदा": "goodbye", "प्यार": "love",
        "दोस्त": "friend", "परिवार": "family", "खाना": "food", "पानी": "water",
        "घर": "home", "काम": "work", "समय": "time", "आज": "today", "कल": "tomorrow",
    },
    "bengali": {
        "নমস্কার": "hello", "ধন্যবাদ": "thank you", "হ্যাঁ": "yes", "না": "no",
        "দয়া করে": "please", "দুঃখিত": "sorry", "সুপ্রভাত": "good morning",
        "শুভ রাত্রি": "good night", "কেমন আছেন": "how are you", "আমি ভালো আছি": "i am fine",
        "আপনি কোথায়": "where are you", "ভালোবাসা": "love", "বন্ধু": "friend",
        "পরিবার": "family", "খাবার": "food", "জল": "water", "বাড়ি": "home",
    },
    "telugu": {
        "నమస్కారం": "hello", "ధన్యవాదాలు": "thank you", "అవును": "yes", "కాదు": "no",
        "దయచేసి": "please", "క్షమించండి": "sorry", "శుభోదయం": "good morning",
        "శుభ రాత్రి": "good night", "మీరు ఎలా ఉన్నారు": "how are you",
        "నేను బాగున్నాను": "i am fine", "ప్రేమ": "love", "స్నేహితుడు": "friend",
    },
    "marathi": {
        "नमस्कार": "hello", "धन्यवाद": "thank you", "हो": "yes", "नाही": "no",
        "कृपया": "please", "माफ करा": "sorry", "शुभ प्रभात": "good morning",
        "शुभ रात्री": "good night", "तुम्ही कसे आहात": "how are you",
        "मी ठीक आहे": "i am fine", "प्रेम": "love", "मित्र": "friend",
    },
    "tamil": {
        "வணக்கம்": "hello", "நன்றி": "thank you", "ஆம்": "yes", "இல்லை": "no",
        "தயவுசெய்து": "please", "மன்னிக்கவும்": "sorry", "காலை வணக்கம்": "good morning",
        "இரவு வணக்கம்": "good night", "நீங்கள் எப்படி இருக்கிறீர்கள்": "how are you",
        "நான் நன்றாக இருக்கிறேன்": "i am fine", "காதல்": "love", "நண்பர்": "friend",
    },
    "urdu": {
        "السلام علیکم": "hello", "شکریہ": "thank you", "ہاں": "yes", "نہیں": "no",
        "براہ کرم": "please", "معاف کیجیے": "sorry", "صبح بخیر": "good morning",
        "شب بخیر": "good night", "آپ کیسے ہیں": "how are you",
        "میں ٹھیک ہوں": "i am fine", "محبت": "love", "دوست": "friend",
    },
    "gujarati": {
        "નમસ્તે": "hello", "આભાર": "thank you", "હા": "yes", "ના": "no",
        "કૃપા કરીને": "please", "માફ કરશો": "sorry", "સુપ્રભાત": "good morning",
        "શુભ રાત્રી": "good night", "તમે કેમ છો": "how are you",
        "હું સારું છું": "i am fine", "પ્રેમ": "love", "મિત્ર": "friend",
    },
    "kannada": {
        "ನಮಸ್ಕಾರ": "hello", "ಧನ್ಯವಾದ": "thank you", "ಹೌದು": "yes", "ಇಲ್ಲ": "no",
        "ದಯವಿಟ್ಟು": "please", "ಕ್ಷಮಿಸಿ": "sorry", "ಶುಭೋದಯ": "good morning",
        "ಶುಭ ರಾತ್ರಿ": "good night", "ನೀವು ಹೇಗಿದ್ದೀರಿ": "how are you",
        "ನಾನು ಚೆನ್ನಾಗಿದ್ದೇನೆ": "i am fine", "ಪ್ರೀತಿ": "love", "ಸ್ನೇಹಿತ": "friend",
    },
    "odia": {
        "ନମସ୍କାର": "hello", "ଧନ୍ୟବାଦ": "thank you", "ହଁ": "yes", "ନା": "no",
        "ଦୟାକରି": "please", "କ୍ଷମା କରନ୍ତୁ": "sorry", "ସୁପ୍ରଭାତ": "good morning",
        "ଶୁଭ ରାତ୍ରି": "good night", "ଆପଣ କେମିତି ଅଛନ୍ତି": "how are you",
        "ମୁଁ ଭଲ ଅଛି": "i am fine", "ପ୍ରେମ": "love", "ବନ୍ଧୁ": "friend",
    },
    "punjabi": {
        "ਸਤ ਸ੍ਰੀ ਅਕਾਲ": "hello", "ਧੰਨਵਾਦ": "thank you", "ਹਾਂ": "yes", "ਨਹੀਂ": "no",
        "ਕਿਰਪਾ ਕਰਕੇ": "please", "ਮਾਫ਼ ਕਰਨਾ": "sorry", "ਸ਼ੁਭ ਸਵੇਰ": "good morning",
        "ਸ਼ੁਭ ਰਾਤ": "good night", "ਤੁਸੀਂ ਕਿਵੇਂ ਹੋ": "how are you",
        "ਮੈਂ ਠੀਕ ਹਾਂ": "i am fine", "ਪਿਆਰ": "love", "ਦੋਸਤ": "friend",
    },
    "malayalam": {
        "നമസ്കാരം": "hello", "നന്ദി": "thank you", "അതെ": "yes", "ഇല്ല": "no",
        "ദയവായി": "please", "ക്ഷമിക്കണം": "sorry", "സുപ്രഭാതം": "good morning",
        "ശുഭ രാത്രി": "good night", "സുഖമാണോ": "how are you",
        "എനിക്ക് സുഖമാണ്": "i am fine", "സ്നേഹം": "love", "സുഹൃത്ത്": "friend",
    },
    "assamese": {
        "নমস্কাৰ": "hello", "ধন্যবাদ": "thank you", "হয়": "yes", "নহয়": "no",
        "অনুগ্ৰহ কৰি": "please", "ক্ষমা কৰিব": "sorry", "সুপ্ৰভাত": "good morning",
        "শুভ ৰাত্ৰি": "good night", "আপুনি কেনে আছে": "how are you",
        "মই ভালে আছোঁ": "i am fine", "প্ৰেম": "love", "বন্ধু": "friend",
    },
    "chinese": {
        "你好": "hello", "谢谢": "thank you", "是": "yes", "不": "no",
        "请": "please", "对不起": "sorry", "早上好": "good morning",
        "晚安": "good night", "你好吗": "how are you", "我很好": "i am fine",
        "爱": "love", "朋友": "friend", "家人": "family", "食物": "food",
        "水": "water", "家": "home", "工作": "work", "时间": "time",
    },
    "spanish": {
        "hola": "hello", "gracias": "thank you", "sí": "yes", "no": "no",
        "por favor": "please", "lo siento": "sorry", "buenos días": "good morning",
        "buenas noches": "good night", "cómo estás": "how are you",
        "estoy bien": "i am fine", "amor": "love", "amigo": "friend",
        "familia": "family", "comida": "food", "agua": "water", "casa": "home",
    },
    "portuguese": {
        "olá": "hello", "obrigado": "thank you", "sim": "yes", "não": "no",
        "por favor": "please", "desculpe": "sorry", "bom dia": "good morning",
        "boa noite": "good night", "como você está": "how are you",
        "estou bem": "i am fine", "amor": "love", "amigo": "friend",
    },
    "russian": {
        "привет": "hello", "спасибо": "thank you", "да": "yes", "нет": "no",
        "пожалуйста": "please", "извините": "sorry", "доброе утро": "good morning",
        "спокойной ночи": "good night", "как дела": "how are you",
        "у меня всё хорошо": "i am fine", "любовь": "love", "друг": "friend",
    },
    "japanese": {
        "こんにちは": "hello", "ありがとう": "thank you", "はい": "yes", "いいえ": "no",
        "お願いします": "please", "すみません": "sorry", "おはようございます": "good morning",
        "おやすみなさい": "good night", "お元気ですか": "how are you",
        "元気です": "i am fine", "愛": "love", "友達": "friend",
    },
    "korean": {
        "안녕하세요": "hello", "감사합니다": "thank you", "네": "yes", "아니요": "no",
        "제발": "please", "미안합니다": "sorry", "좋은 아침": "good morning",
        "안녕히 주무세요": "good night", "어떻게 지내세요": "how are you",
        "잘 지내요": "i am fine", "사랑": "love", "친구": "friend",
    },
    "french": {
        "bonjour": "hello", "merci": "thank you", "oui": "yes", "non": "no",
        "s'il vous plaît": "please", "désolé": "sorry", "bon matin": "good morning",
        "bonne nuit": "good night", "comment allez-vous": "how are you",
        "je vais bien": "i am fine", "amour": "love", "ami": "friend",
    },
    "german": {
        "hallo": "hello", "danke": "thank you", "ja": "yes", "nein": "no",
        "bitte": "please", "entschuldigung": "sorry", "guten morgen": "good morning",
        "gute nacht": "good night", "wie geht es ihnen": "how are you",
        "mir geht es gut": "i am fine", "liebe": "love", "freund": "friend",
    },
    "italian": {
        "ciao": "hello", "grazie": "thank you", "sì": "yes", "no": "no",
        "per favore": "please", "scusa": "sorry", "buongiorno": "good morning",
        "buonanotte": "good night", "come stai": "how are you",
        "sto bene": "i am fine", "amore": "love", "amico": "friend",
    },
    "turkish": {
        "merhaba": "hello", "teşekkürler": "thank you", "evet": "yes", "hayır": "no",
        "lütfen": "please", "özür dilerim": "sorry", "günaydın": "good morning",
        "iyi geceler": "good night", "nasılsınız": "how are you",
        "iyiyim": "i am fine", "aşk": "love", "arkadaş": "friend",
    },
    "vietnamese": {
        "xin chào": "hello", "cảm ơn": "thank you", "vâng": "yes", "không": "no",
        "làm ơn": "please", "xin lỗi": "sorry", "chào buổi sáng": "good morning",
        "chúc ngủ ngon": "good night", "bạn khỏe không": "how are you",
        "tôi khỏe": "i am fine", "tình yêu": "love", "bạn bè": "friend",
    },
    "thai": {
        "สวัสดี": "hello", "ขอบคุณ": "thank you", "ใช่": "yes", "ไม่": "no",
        "กรุณา": "please", "ขอโทษ": "sorry", "สวัสดีตอนเช้า": "good morning",
        "ราตรีสวัสดิ์": "good night", "สบายดีไหม": "how are you",
        "สบายดี": "i am fine", "ความรัก": "love", "เพื่อน": "friend",
    },
    "indonesian": {
        "halo": "hello", "terima kasih": "thank you", "ya": "yes", "tidak": "no",
        "tolong": "please", "maaf": "sorry", "selamat pagi": "good morning",
        "selamat malam": "good night", "apa kabar": "how are you",
        "saya baik": "i am fine", "cinta": "love", "teman": "friend",
    },
    "malay": {
        "halo": "hello", "terima kasih": "thank you", "ya": "yes", "tidak": "no",
        "tolong": "please", "maaf": "sorry", "selamat pagi": "good morning",
        "selamat malam": "good night", "apa khabar": "how are you",
        "saya baik": "i am fine", "cinta": "love", "kawan": "friend",
    },
    "arabic": {
        "مرحبا": "hello", "شكرا": "thank you", "نعم": "yes", "لا": "no",
        "من فضلك": "please", "آسف": "sorry", "صباح الخير": "good morning",
        "تصبح على خير": "good night", "كيف حالك": "how are you",
        "أنا بخير": "i am fine", "حب": "love", "صديق": "friend",
    },
    "persian": {
        "سلام": "hello", "متشکرم": "thank you", "بله": "yes", "نه": "no",
        "لطفا": "please", "متاسفم": "sorry", "صبح بخیر": "good morning",
        "شب بخیر": "good night", "حالت چطوره": "how are you",
        "خوبم": "i am fine", "عشق": "love", "دوست": "friend",
    },
    "dutch": {
        "hallo": "hello", "dank je": "thank you", "ja": "yes", "nee": "no",
        "alsjeblieft": "please", "sorry": "sorry", "goedemorgen": "good morning",
        "goedenacht": "good night", "hoe gaat het": "how are you",
        "het gaat goed": "i am fine", "liefde": "love", "vriend": "friend",
    },
    "polish": {
        "cześć": "hello", "dziękuję": "thank you", "tak": "yes", "nie": "no",
        "proszę": "please", "przepraszam": "sorry", "dzień dobry": "good morning",
        "dobranoc": "good night", "jak się masz": "how are you",
        "mam się dobrze": "i am fine", "miłość": "love", "przyjaciel": "friend",
    },
    "ukrainian": {
        "привіт": "hello", "дякую": "thank you", "так": "yes", "ні": "no",
        "будь ласка": "please", "вибачте": "sorry", "доброго ранку": "good morning",
        "на добраніч": "good night", "як справи": "how are you",
        "у мене все добре": "i am fine", "любов": "love", "друг": "friend",
    },
    "romanian": {
        "bună": "hello", "mulțumesc": "thank you", "da": "yes", "nu": "no",
        "te rog": "please", "îmi pare rău": "sorry", "bună dimineața": "good morning",
        "noapte bună": "good night", "ce mai faci": "how are you",
        "sunt bine": "i am fine", "dragoste": "love", "prieten": "friend",
    },
    "greek": {
        "γεια": "hello", "ευχαριστώ": "thank you", "ναι": "yes", "όχι": "no",
        "παρακαλώ": "please", "συγγνώμη": "sorry", "καλημέρα": "good morning",
        "καληνύχτα": "good night", "τι κάνεις": "how are you",
        "είμαι καλά": "i am fine", "αγάπη": "love", "φίλος": "friend",
    },
    "hebrew": {
        "שלום": "hello", "תודה": "thank you", "כן": "yes", "לא": "no",
        "בבקשה": "please", "סליחה": "sorry", "בוקר טוב": "good morning",
        "לילה טוב": "good night", "מה שלומך": "how are you",
        "אני בסדר": "i am fine", "אהבה": "love", "חבר": "friend",
    },
    "swahili": {
        "habari": "hello", "asante": "thank you", "ndiyo": "yes", "hapana": "no",
        "tafadhali": "please", "pole": "sorry", "habari ya asubuhi": "good morning",
        "usiku mwema": "good night", "habari yako": "how are you",
        "niko sawa": "i am fine", "upendo": "love", "rafiki": "friend",
    },
    "amharic": {
        "ሰላም": "hello", "አመሰግናለሁ": "thank you", "አዎ": "yes", "አይ": "no",
        "እባክህ": "please", "ይቅርታ": "sorry", "እንደምን አደርክ": "good morning",
        "መልካም ሌሊት": "good night", "እንዴት ነህ": "how are you",
        "ደህና ነኝ": "i am fine", "ፍቅር": "love", "ጓደኛ": "friend",
    },
    "hungarian": {
        "szia": "hello", "köszönöm": "thank you", "igen": "yes", "nem": "no",
        "kérem": "please", "sajnálom": "sorry", "jó reggelt": "good morning",
        "jó éjszakát": "good night", "hogy vagy": "how are you",
        "jól vagyok": "i am fine", "szerelem": "love", "barát": "friend",
    },
    "czech": {
        "ahoj": "hello", "děkuji": "thank you", "ano": "yes", "ne": "no",
        "prosím": "please", "promiňte": "sorry", "dobré ráno": "good morning",
        "dobrou noc": "good night", "jak se máš": "how are you",
        "mám se dobře": "i am fine", "láska": "love", "přítel": "friend",
    },
    "swedish": {
        "hej": "hello", "tack": "thank you", "ja": "yes", "nej": "no",
        "snälla": "please", "förlåt": "sorry", "god morgon": "good morning",
        "god natt": "good night", "hur mår du": "how are you",
        "jag mår bra": "i am fine", "kärlek": "love", "vän": "friend",
    },
    "tagalog": {
        "kamusta": "hello", "salamat": "thank you", "oo": "yes", "hindi": "no",
        "pakiusap": "please", "pasensya": "sorry", "magandang umaga": "good morning",
        "magandang gabi": "good night", "kumusta ka": "how are you",
        "mabuti ako": "i am fine", "pagmamahal": "love", "kaibigan": "friend",
    },
    "nepali": {
        "नमस्ते": "hello", "धन्यवाद": "thank you", "हो": "yes", "होइन": "no",
        "कृपया": "please", "माफ गर्नुहोस्": "sorry", "शुभ प्रभात": "good morning",
        "शुभ रात्रि": "good night", "तपाईंलाई कस्तो छ": "how are you",
        "म ठीक छु": "i am fine", "माया": "love", "साथी": "friend",
    },
    "sinhala": {
        "ආයුබෝවන්": "hello", "ස්තූතියි": "thank you", "ඔව්": "yes", "නැහැ": "no",
        "කරුණාකර": "please", "සමාවෙන්න": "sorry", "සුභ උදෑසනක්": "good morning",
        "සුභ රාත්‍රියක්": "good night", "කොහොමද": "how are you",
        "මම හොඳින්": "i am fine", "ආදරය": "love", "යාළුවා": "friend",
    },
    "khmer": {
        "សួស្តី": "hello", "អរគុណ": "thank you", "បាទ": "yes", "ទេ": "no",
        "សូម": "please", "សុំទោស": "sorry", "អរុណសួស្តី": "good morning",
        "រាត្រីសួស្តី": "good night", "សុខសប្បាយទេ": "how are you",
        "ខ្ញុំសុខសប្បាយ": "i am fine", "ស្នេហា": "love", "មិត្តភក្តិ": "friend",
    },
    "burmese": {
        "မင်္ဂလာပါ": "hello", "ကျေးဇူးတင်ပါတယ်": "thank you", "ဟုတ်ကဲ့": "yes", "မဟုတ်ဘူး": "no",
        "ကျေးဇူးပြု၍": "please", "တောင်းပန်ပါတယ်": "sorry", "မင်္ဂလာနံနက်ခင်းပါ": "good morning",
        "ညဖက်ကောင်းပါစေ": "good night", "နေကောင်းလား": "how are you",
        "ကျွန်တော်ကောင်းပါတယ်": "i am fine", "အချစ်": "love", "သူငယ်ချင်း": "friend",
    },
    "pashto": {
        "سلام": "hello", "مننه": "thank you", "هو": "yes", "نه": "no",
        "مهرباني وکړئ": "please", "بخښنه غواړم": "sorry", "سهار مو پخیر": "good morning",
        "شپه مو پخیر": "good night", "څنګه یاست": "how are you",
        "زه ښه یم": "i am fine", "مینه": "love", "ملګری": "friend",
    },
    "uzbek": {
        "salom": "hello", "rahmat": "thank you", "ha": "yes", "yo'q": "no",
        "iltimos": "please", "kechirasiz": "sorry", "xayrli tong": "good morning",
        "xayrli tun": "good night", "qanday siz": "how are you",
        "men yaxshiman": "i am fine", "sevgi": "love", "do'st": "friend",
    },
    "azerbaijani": {
        "salam": "hello", "təşəkkür edirəm": "thank you", "bəli": "yes", "xeyr": "no",
        "zəhmət olmasa": "please", "bağışlayın": "sorry", "sabahınız xeyir": "good morning",
        "gecəniz xeyrə qalsın": "good night", "necəsiniz": "how are you",
        "yaxşıyam": "i am fine", "sevgi": "love", "dost": "friend",
    },
}
