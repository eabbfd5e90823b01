"""
Built-in translation tables for the portal, one table per locale code,
plus loading of JSON overrides.
"""

import json
import logging
from pathlib import Path
from typing import Dict, Optional, Union

from .locales import LocaleCode

logger = logging.getLogger(__name__)

TranslationTable = Dict[str, str]

TRANSLATIONS: Dict[str, TranslationTable] = {
    "en": {
        "appName": "MediTech",
        "welcome": "Welcome to MediTech",
        "selectRole": "Select Your Role",
        "patient": "Patient",
        "doctor": "Doctor",
        "healthWorker": "Health Worker",
        "pharmacist": "Pharmacist",
        "login": "Login",
        "username": "Username",
        "password": "Password",
        "forgotPassword": "Forgot Password?",
        "loginButton": "Sign In",
        "dashboard": "Dashboard",
        "bookAppointment": "Book Appointment",
        "chatbot": "Health Assistant",
        "medicalHistory": "Medical History",
        "prescriptions": "Prescriptions",
        "emergency": "Emergency",
        "patientQueue": "Patient Queue",
        "videoCall": "Video Call",
        "prescription": "Write Prescription",
        "registerPatient": "Register Patient",
        "assignDoctor": "Assign Doctor",
        "viewPrescription": "View Prescription",
        "dispense": "Dispense Medicine",
        "offline": "You are offline",
        "voiceNavigation": "Voice Navigation",
        "speakToNavigate": "Speak to Navigate",
        "listening": "Listening...",
        "language": "Language",
        "enabled": "enabled",
        "disabled": "disabled",
        "didNotUnderstand": "Sorry, I didn't understand that",
        "languageChanged": "Language changed to {language}",
        "voiceUnavailable": "Voice features are not available on this device",
    },
    "hi": {
        "appName": "मेडीटेक",
        "welcome": "मेडीटेक में आपका स्वागत है",
        "selectRole": "अपनी भूमिका चुनें",
        "patient": "मरीज़",
        "doctor": "डॉक्टर",
        "healthWorker": "स्वास्थ्य कर्मचारी",
        "pharmacist": "फार्मासिस्ट",
        "login": "लॉगिन",
        "username": "उपयोगकर्ता नाम",
        "password": "पासवर्ड",
        "forgotPassword": "पासवर्ड भूल गए?",
        "loginButton": "साइन इन करें",
        "dashboard": "डैशबोर्ड",
        "bookAppointment": "अपॉइंटमेंट बुक करें",
        "chatbot": "स्वास्थ्य सहायक",
        "medicalHistory": "चिकित्सा इतिहास",
        "prescriptions": "नुस्खे",
        "emergency": "आपातकाल",
        "patientQueue": "मरीज़ों की कतार",
        "videoCall": "वीडियो कॉल",
        "prescription": "नुस्खा लिखें",
        "registerPatient": "मरीज़ का पंजीकरण",
        "assignDoctor": "डॉक्टर नियुक्त करें",
        "viewPrescription": "नुस्खा देखें",
        "dispense": "दवा दें",
        "offline": "आप ऑफ़लाइन हैं",
        "voiceNavigation": "वॉयस नेवीगेशन",
        "speakToNavigate": "नेवीगेट करने के लिए बोलें",
        "listening": "सुन रहे हैं...",
        "language": "भाषा",
        "enabled": "सक्षम",
        "disabled": "अक्षम",
        "didNotUnderstand": "माफ़ कीजिए, मैं समझ नहीं पाया",
        "languageChanged": "भाषा {language} में बदल दी गई",
        "voiceUnavailable": "वॉयस सुविधा उपलब्ध नहीं है",
    },
    "ta": {
        "appName": "மெடிடெக்",
        "welcome": "மெடிடெக்கில் வரவேற்கிறோம்",
        "selectRole": "உங்கள் பாத்திரத்தைத் தேர்ந்தெடுக்கவும்",
        "patient": "நோயாளி",
        "doctor": "மருத்துவர்",
        "healthWorker": "சுகாதார பணியாளர்",
        "pharmacist": "மருந்தாளர்",
        "login": "உள்நுழைவு",
        "username": "பயனர் பெயர்",
        "password": "கடவுச்சொல்",
        "forgotPassword": "கடவுச்சொல்லை மறந்துவிட்டீர்களா?",
        "loginButton": "உள்நுழைக",
        "dashboard": "முகப்புப் பலகை",
        "bookAppointment": "சந்திப்பு முன்பதிவு",
        "chatbot": "சுகாதார உதவியாளர்",
        "medicalHistory": "மருத்துவ வரலாறு",
        "prescriptions": "மருந்துச் சீட்டுகள்",
        "emergency": "அவசரநிலை",
        "patientQueue": "நோயாளிகள் வரிசை",
        "videoCall": "வீடியோ அழைப்பு",
        "prescription": "மருந்துச் சீட்டு எழுதவும்",
        "registerPatient": "நோயாளி பதிவு",
        "assignDoctor": "மருத்துவரை நியமிக்கவும்",
        "viewPrescription": "மருந்துச் சீட்டுகளைப் பார்க்கவும்",
        "dispense": "மருந்து வழங்கவும்",
        "offline": "நீங்கள் ஆஃப்லைனில் இருக்கிறீர்கள்",
        "voiceNavigation": "குரல் வழிசெலுத்தல்",
        "speakToNavigate": "செல்ல பேசவும்",
        "listening": "கேட்டுக்கொண்டிருக்கிறது...",
        "language": "மொழி",
        "enabled": "இயக்கப்பட்டது",
        "disabled": "முடக்கப்பட்டது",
        "didNotUnderstand": "மன்னிக்கவும், எனக்குப் புரியவில்லை",
        "languageChanged": "மொழி {language} ஆக மாற்றப்பட்டது",
        "voiceUnavailable": "குரல் வசதி கிடைக்கவில்லை",
    },
    "ml": {
        "appName": "മെഡിടെക്",
        "welcome": "മെഡിടെക്കിലേക്ക് സ്വാഗതം",
        "selectRole": "നിങ്ങളുടെ റോൾ തിരഞ്ഞെടുക്കുക",
        "patient": "രോഗി",
        "doctor": "ഡോക്ടർ",
        "healthWorker": "ആരോഗ്യ പ്രവർത്തകൻ",
        "pharmacist": "ഫാർമസിസ്റ്റ്",
        "login": "ലോഗിൻ",
        "username": "ഉപയോക്തൃനാമം",
        "password": "പാസ്‌വേഡ്",
        "forgotPassword": "പാസ്‌വേഡ് മറന്നോ?",
        "loginButton": "സൈൻ ഇൻ ചെയ്യുക",
        "dashboard": "ഡാഷ്ബോർഡ്",
        "bookAppointment": "അപ്പോയിന്റ്മെന്റ് ബുക്ക് ചെയ്യുക",
        "chatbot": "ആരോഗ്യ സഹായി",
        "medicalHistory": "ചികിത്സാ ചരിത്രം",
        "prescriptions": "കുറിപ്പടികൾ",
        "emergency": "അടിയന്തരാവസ്ഥ",
        "patientQueue": "രോഗികളുടെ നിര",
        "videoCall": "വീഡിയോ കോൾ",
        "prescription": "കുറിപ്പടി എഴുതുക",
        "registerPatient": "രോഗിയെ രജിസ്റ്റർ ചെയ്യുക",
        "assignDoctor": "ഡോക്ടറെ നിയോഗിക്കുക",
        "viewPrescription": "കുറിപ്പടി കാണുക",
        "dispense": "മരുന്ന് നൽകുക",
        "offline": "നിങ്ങൾ ഓഫ്‌ലൈനാണ്",
        "voiceNavigation": "ശബ്ദ നാവിഗേഷൻ",
        "speakToNavigate": "നാവിഗേറ്റ് ചെയ്യാൻ സംസാരിക്കുക",
        "listening": "കേൾക്കുന്നു...",
        "language": "ഭാഷ",
        "enabled": "സജീവമാക്കി",
        "disabled": "നിർജ്ജീവമാക്കി",
        "didNotUnderstand": "ക്ഷമിക്കണം, എനിക്ക് മനസ്സിലായില്ല",
        "languageChanged": "ഭാഷ {language} ആയി മാറ്റി",
        "voiceUnavailable": "ശബ്ദ സൗകര്യം ലഭ്യമല്ല",
    },
    "pa": {
        "appName": "ਮੈਡੀਟੈਕ",
        "welcome": "ਮੈਡੀਟੈਕ ਵਿੱਚ ਤੁਹਾਡਾ ਸੁਆਗਤ ਹੈ",
        "selectRole": "ਆਪਣੀ ਭੂਮਿਕਾ ਚੁਣੋ",
        "patient": "ਮਰੀਜ਼",
        "doctor": "ਡਾਕਟਰ",
        "healthWorker": "ਸਿਹਤ ਕਰਮਚਾਰੀ",
        "pharmacist": "ਫਾਰਮਾਸਿਸਟ",
        "login": "ਲੌਗਇਨ",
        "username": "ਵਰਤੋਂਕਾਰ ਨਾਮ",
        "password": "ਪਾਸਵਰਡ",
        "forgotPassword": "ਪਾਸਵਰਡ ਭੁੱਲ ਗਏ?",
        "loginButton": "ਸਾਈਨ ਇਨ ਕਰੋ",
        "dashboard": "ਡੈਸ਼ਬੋਰਡ",
        "bookAppointment": "ਮੁਲਾਕਾਤ ਬੁੱਕ ਕਰੋ",
        "chatbot": "ਸਿਹਤ ਸਹਾਇਕ",
        "medicalHistory": "ਡਾਕਟਰੀ ਇਤਿਹਾਸ",
        "prescriptions": "ਨੁਸਖ਼ੇ",
        "emergency": "ਐਮਰਜੈਂਸੀ",
        "patientQueue": "ਮਰੀਜ਼ਾਂ ਦੀ ਕਤਾਰ",
        "videoCall": "ਵੀਡੀਓ ਕਾਲ",
        "prescription": "ਨੁਸਖ਼ਾ ਲਿਖੋ",
        "registerPatient": "ਮਰੀਜ਼ ਦੀ ਰਜਿਸਟ੍ਰੇਸ਼ਨ",
        "assignDoctor": "ਡਾਕਟਰ ਨਿਯੁਕਤ ਕਰੋ",
        "viewPrescription": "ਨੁਸਖ਼ਾ ਵੇਖੋ",
        "dispense": "ਦਵਾਈ ਦਿਓ",
        "offline": "ਤੁਸੀਂ ਔਫਲਾਈਨ ਹੋ",
        "voiceNavigation": "ਆਵਾਜ਼ ਨੈਵੀਗੇਸ਼ਨ",
        "speakToNavigate": "ਨੈਵੀਗੇਟ ਕਰਨ ਲਈ ਬੋਲੋ",
        "listening": "ਸੁਣ ਰਹੇ ਹਾਂ...",
        "language": "ਭਾਸ਼ਾ",
        "enabled": "ਚਾਲੂ",
        "disabled": "ਬੰਦ",
        "didNotUnderstand": "ਮਾਫ਼ ਕਰਨਾ, ਮੈਨੂੰ ਸਮਝ ਨਹੀਂ ਆਇਆ",
        "languageChanged": "ਭਾਸ਼ਾ {language} ਵਿੱਚ ਬਦਲੀ ਗਈ",
        "voiceUnavailable": "ਆਵਾਜ਼ ਸਹੂਲਤ ਉਪਲਬਧ ਨਹੀਂ ਹੈ",
    },
}


def build_translation_tables(locales_path: Optional[Union[str, Path]] = None) -> Dict[str, TranslationTable]:
    """Copy the built-in tables and merge any <code>.json overrides on top"""
    tables = {code: dict(table) for code, table in TRANSLATIONS.items()}

    if locales_path is None:
        return tables

    locales_dir = Path(locales_path)
    if not locales_dir.is_dir():
        logger.warning(f"Translation directory not found: {locales_dir}")
        return tables

    for locale in LocaleCode:
        json_file = locales_dir / f"{locale.code}.json"
        if not json_file.exists():
            continue
        try:
            with open(json_file, "r", encoding="utf-8") as f:
                overrides = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.error(f"Error loading translation file {json_file}: {e}")
            continue

        if not isinstance(overrides, dict):
            logger.error(f"Translation file {json_file} must contain a JSON object")
            continue

        loaded = {str(k): v for k, v in overrides.items() if isinstance(v, str)}
        tables.setdefault(locale.code, {}).update(loaded)
        logger.info(f"Loaded {len(loaded)} translation overrides for {locale.english_name}")

    return tables
