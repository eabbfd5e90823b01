"""
Voice command keyword data, one set per locale.

Each locale also lists the English words, since recognizers in Indian
locales frequently return loanwords such as "home" or "login" in Latin script.
"""

from typing import Dict, List

# intent name -> keywords, per locale code
COMMAND_KEYWORDS: Dict[str, Dict[str, List[str]]] = {
    "en": {
        "home": ["home", "main page", "start page"],
        "login": ["login", "log in", "sign in"],
        "help": ["help", "assist"],
    },
    "hi": {
        "home": ["होम", "मुख्य पृष्ठ", "घर", "home"],
        "login": ["लॉगिन", "लॉग इन", "साइन इन", "login"],
        "help": ["मदद", "सहायता", "help"],
    },
    "ta": {
        "home": ["வீடு", "முகப்பு", "home"],
        "login": ["உள்நுழைவு", "உள்நுழை", "login"],
        "help": ["உதவி", "help"],
    },
    "ml": {
        "home": ["ഹോം", "വീട്", "പ്രധാന പേജ്", "home"],
        "login": ["ലോഗിൻ", "പ്രവേശിക്കുക", "login"],
        "help": ["സഹായം", "help"],
    },
    "pa": {
        "home": ["ਹੋਮ", "ਘਰ", "ਮੁੱਖ ਪੰਨਾ", "home"],
        "login": ["ਲੌਗਇਨ", "ਲਾਗਇਨ", "ਸਾਈਨ ਇਨ", "login"],
        "help": ["ਮਦਦ", "ਸਹਾਇਤਾ", "help"],
    },
}

# portal role -> keywords, per locale code; checked in this order
ROLE_KEYWORDS: Dict[str, Dict[str, List[str]]] = {
    "en": {
        "doctor": ["doctor"],
        "health-worker": ["health worker", "healthworker", "asha"],
        "pharmacist": ["pharmacist", "pharmacy", "chemist"],
        "patient": ["patient"],
    },
    "hi": {
        "doctor": ["डॉक्टर", "चिकित्सक", "doctor"],
        "health-worker": ["स्वास्थ्य कर्मचारी", "आशा", "health worker"],
        "pharmacist": ["फार्मासिस्ट", "pharmacist"],
        "patient": ["मरीज़", "मरीज", "रोगी", "patient"],
    },
    "ta": {
        "doctor": ["மருத்துவர்", "doctor"],
        "health-worker": ["சுகாதார பணியாளர்", "health worker"],
        "pharmacist": ["மருந்தாளர்", "pharmacist"],
        "patient": ["நோயாளி", "patient"],
    },
    "ml": {
        "doctor": ["ഡോക്ടർ", "doctor"],
        "health-worker": ["ആരോഗ്യ പ്രവർത്തക", "health worker"],
        "pharmacist": ["ഫാർമസിസ്റ്റ്", "pharmacist"],
        "patient": ["രോഗി", "patient"],
    },
    "pa": {
        "doctor": ["ਡਾਕਟਰ", "doctor"],
        "health-worker": ["ਸਿਹਤ ਕਰਮਚਾਰੀ", "health worker"],
        "pharmacist": ["ਫਾਰਮਾਸਿਸਟ", "pharmacist"],
        "patient": ["ਮਰੀਜ਼", "ਮਰੀਜ", "patient"],
    },
}

DEFAULT_ROLE = "patient"
