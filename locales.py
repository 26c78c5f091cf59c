"""
UI languages and string catalogs. English is the fallback for unknown
languages and for keys a catalog does not translate.
"""

DEFAULT_LANGUAGE = 'en'

LANGUAGES = [
    {'code': 'en', 'name': 'English', 'native': 'English'},
    {'code': 'hi', 'name': 'Hindi', 'native': 'हिन्दी'},
    {'code': 'es', 'name': 'Spanish', 'native': 'Español'},
    {'code': 'ar', 'name': 'Arabic', 'native': 'العربية'},
    {'code': 'fr', 'name': 'French', 'native': 'Français'},
    {'code': 'bn', 'name': 'Bengali', 'native': 'বাংলা'},
    {'code': 'ta', 'name': 'Tamil', 'native': 'தமிழ்'},
    {'code': 'te', 'name': 'Telugu', 'native': 'తెలుగు'},
    {'code': 'mr', 'name': 'Marathi', 'native': 'मराठी'},
    {'code': 'gu', 'name': 'Gujarati', 'native': 'ગુજરાતી'},
    {'code': 'kn', 'name': 'Kannada', 'native': 'ಕನ್ನಡ'},
    {'code': 'ml', 'name': 'Malayalam', 'native': 'മലയാളം'},
    {'code': 'pa', 'name': 'Punjabi', 'native': 'ਪੰਜਾਬੀ'},
    {'code': 'or', 'name': 'Odia', 'native': 'ଓଡ଼ିଆ'},
    {'code': 'as', 'name': 'Assamese', 'native': 'অসমীয়া'},
    {'code': 'ur', 'name': 'Urdu', 'native': 'اردو'},
    {'code': 'ne', 'name': 'Nepali', 'native': 'नेपाली'},
    {'code': 'si', 'name': 'Sinhala', 'native': 'සිංහල'},
    {'code': 'sd', 'name': 'Sindhi', 'native': 'سنڌي'},
    {'code': 'dv', 'name': 'Dhivehi', 'native': 'ދިވެހި'},
    {'code': 'bho', 'name': 'Bhojpuri', 'native': 'भोजपुरी'},
]

LANGUAGE_CODES = {lang['code'] for lang in LANGUAGES}

CATALOGS = {
    'en': {
        'nav.features': 'Features',
        'nav.planner': 'Planner',
        'nav.pest_detector': 'Pest Detector',
        'nav.crop_health': 'Crop Health',
        'nav.weather': 'Weather',
        'nav.market': 'Market',
        'nav.store': 'Store',
        'nav.notifications': 'Notifications',
        'nav.get_started': 'Get Started',
        'hero.title': 'Smarter farming, season after season',
        'hero.subtitle': 'AI-powered pest detection, weather advice and crop planning for farmers across Southern Asia.',
        'features.title': 'Smart Tools for Modern Farming',
        'features.subtitle': 'AgriNova combines AI technology with agricultural expertise to help you make better decisions every day.',
        'planner.title': 'Crop Planning Calendar',
        'planner.subtitle': 'Schedule planting, watering, and harvest dates. Set reminders to stay on track.',
        'language.choose': 'Choose your language',
    },
    'hi': {
        'nav.features': 'विशेषताएँ',
        'nav.planner': 'योजनाकार',
        'nav.pest_detector': 'कीट पहचान',
        'nav.crop_health': 'फसल स्वास्थ्य',
        'nav.weather': 'मौसम',
        'nav.market': 'बाज़ार',
        'nav.store': 'स्टोर',
        'nav.notifications': 'सूचनाएँ',
        'nav.get_started': 'शुरू करें',
        'hero.title': 'हर मौसम में समझदार खेती',
        'features.title': 'आधुनिक खेती के लिए स्मार्ट उपकरण',
        'planner.title': 'फसल योजना कैलेंडर',
        'language.choose': 'अपनी भाषा चुनें',
    },
    'es': {
        'nav.features': 'Funciones',
        'nav.planner': 'Planificador',
        'nav.pest_detector': 'Detector de Plagas',
        'nav.crop_health': 'Salud del Cultivo',
        'nav.weather': 'Clima',
        'nav.market': 'Mercado',
        'nav.store': 'Tienda',
        'nav.notifications': 'Notificaciones',
        'nav.get_started': 'Comenzar',
        'planner.title': 'Calendario de Planificación de Cultivos',
        'language.choose': 'Elige tu idioma',
    },
    'ar': {
        'nav.features': 'الميزات',
        'nav.planner': 'المخطط',
        'nav.pest_detector': 'كاشف الآفات',
        'nav.crop_health': 'صحة المحاصيل',
        'nav.weather': 'الطقس',
        'nav.market': 'السوق',
        'nav.store': 'المتجر',
        'nav.notifications': 'الإشعارات',
        'nav.get_started': 'ابدأ الآن',
        'language.choose': 'اختر لغتك',
    },
    'fr': {
        'nav.features': 'Fonctionnalités',
        'nav.planner': 'Planificateur',
        'nav.pest_detector': 'Détecteur de ravageurs',
        'nav.crop_health': 'Santé des cultures',
        'nav.weather': 'Météo',
        'nav.market': 'Marché',
        'nav.store': 'Boutique',
        'nav.notifications': 'Notifications',
        'nav.get_started': 'Commencer',
        'planner.title': 'Calendrier de planification des cultures',
        'language.choose': 'Choisissez votre langue',
    },
    'bn': {
        'nav.features': 'বৈশিষ্ট্য',
        'nav.planner': 'পরিকল্পনা',
        'nav.pest_detector': 'পোকা সনাক্তকরণ',
        'nav.crop_health': 'ফসলের স্বাস্থ্য',
        'nav.weather': 'আবহাওয়া',
        'nav.market': 'বাজার',
        'nav.store': 'দোকান',
        'nav.notifications': 'বিজ্ঞপ্তি',
        'nav.get_started': 'শুরু করুন',
        'planner.title': 'ফসল পরিকল্পনা ক্যালেন্ডার',
        'language.choose': 'আপনার ভাষা নির্বাচন করুন',
    },
    'ta': {
        'nav.features': 'அம்சங்கள்',
        'nav.planner': 'திட்டமிடல்',
        'nav.pest_detector': 'பூச்சி கண்டறிதல்',
        'nav.crop_health': 'பயிர் ஆரோக்கியம்',
        'nav.weather': 'வானிலை',
        'nav.market': 'சந்தை',
        'nav.store': 'கடை',
        'nav.notifications': 'அறிவிப்புகள்',
        'nav.get_started': 'தொடங்குங்கள்',
        'language.choose': 'உங்கள் மொழியைத் தேர்ந்தெடுக்கவும்',
    },
    'te': {
        'nav.features': 'ఫీచర్లు',
        'nav.planner': 'ప్లానర్',
        'nav.pest_detector': 'పురుగుల గుర్తింపు',
        'nav.crop_health': 'పంట ఆరోగ్యం',
        'nav.weather': 'వాతావరణం',
        'nav.market': 'మార్కెట్',
        'nav.store': 'స్టోర్',
        'nav.notifications': 'నోటిఫికేషన్లు',
        'nav.get_started': 'ప్రారంభించండి',
        'language.choose': 'మీ భాషను ఎంచుకోండి',
    },
    'mr': {
        'nav.features': 'वैशिष्ट्ये',
        'nav.planner': 'नियोजक',
        'nav.pest_detector': 'कीड ओळख',
        'nav.crop_health': 'पीक आरोग्य',
        'nav.weather': 'हवामान',
        'nav.market': 'बाजार',
        'nav.store': 'दुकान',
        'nav.notifications': 'सूचना',
        'nav.get_started': 'सुरू करा',
        'language.choose': 'तुमची भाषा निवडा',
    },
    'gu': {
        'nav.features': 'સુવિધાઓ',
        'nav.planner': 'આયોજક',
        'nav.pest_detector': 'જીવાત ઓળખ',
        'nav.crop_health': 'પાક આરોગ્ય',
        'nav.weather': 'હવામાન',
        'nav.market': 'બજાર',
        'nav.store': 'સ્ટોર',
        'nav.notifications': 'સૂચનાઓ',
        'nav.get_started': 'શરૂ કરો',
        'language.choose': 'તમારી ભાષા પસંદ કરો',
    },
    'kn': {
        'nav.features': 'ವೈಶಿಷ್ಟ್ಯಗಳು',
        'nav.planner': 'ಯೋಜಕ',
        'nav.pest_detector': 'ಕೀಟ ಪತ್ತೆ',
        'nav.crop_health': 'ಬೆಳೆ ಆರೋಗ್ಯ',
        'nav.weather': 'ಹವಾಮಾನ',
        'nav.market': 'ಮಾರುಕಟ್ಟೆ',
        'nav.store': 'ಅಂಗಡಿ',
        'nav.notifications': 'ಅಧಿಸೂಚನೆಗಳು',
        'nav.get_started': 'ಪ್ರಾರಂಭಿಸಿ',
        'language.choose': 'ನಿಮ್ಮ ಭಾಷೆಯನ್ನು ಆಯ್ಕೆಮಾಡಿ',
    },
    'ml': {
        'nav.features': 'സവിശേഷതകൾ',
        'nav.planner': 'പ്ലാനർ',
        'nav.pest_detector': 'കീട നിർണ്ണയം',
        'nav.crop_health': 'വിള ആരോഗ്യം',
        'nav.weather': 'കാലാവസ്ഥ',
        'nav.market': 'വിപണി',
        'nav.store': 'സ്റ്റോർ',
        'nav.notifications': 'അറിയിപ്പുകൾ',
        'nav.get_started': 'ആരംഭിക്കുക',
        'language.choose': 'നിങ്ങളുടെ ഭാഷ തിരഞ്ഞെടുക്കുക',
    },
    'pa': {
        'nav.features': 'ਵਿਸ਼ੇਸ਼ਤਾਵਾਂ',
        'nav.planner': 'ਯੋਜਨਾਕਾਰ',
        'nav.pest_detector': 'ਕੀੜਾ ਪਛਾਣ',
        'nav.crop_health': 'ਫ਼ਸਲ ਸਿਹਤ',
        'nav.weather': 'ਮੌਸਮ',
        'nav.market': 'ਮੰਡੀ',
        'nav.store': 'ਸਟੋਰ',
        'nav.notifications': 'ਸੂਚਨਾਵਾਂ',
        'nav.get_started': 'ਸ਼ੁਰੂ ਕਰੋ',
        'language.choose': 'ਆਪਣੀ ਭਾਸ਼ਾ ਚੁਣੋ',
    },
    'or': {
        'nav.features': 'ବୈଶିଷ୍ଟ୍ୟ',
        'nav.planner': 'ଯୋଜନାକାରୀ',
        'nav.pest_detector': 'କୀଟ ଚିହ୍ନଟ',
        'nav.crop_health': 'ଫସଲ ସ୍ୱାସ୍ଥ୍ୟ',
        'nav.weather': 'ପାଣିପାଗ',
        'nav.market': 'ବଜାର',
        'nav.store': 'ଷ୍ଟୋର',
        'nav.notifications': 'ବିଜ୍ଞପ୍ତି',
        'nav.get_started': 'ଆରମ୍ଭ କରନ୍ତୁ',
        'language.choose': 'ଆପଣଙ୍କ ଭାଷା ବାଛନ୍ତୁ',
    },
    'as': {
        'nav.features': 'বৈশিষ্ট্য',
        'nav.planner': 'পৰিকল্পনা',
        'nav.pest_detector': 'পোক চিনাক্তকৰণ',
        'nav.crop_health': 'শস্যৰ স্বাস্থ্য',
        'nav.weather': 'বতৰ',
        'nav.market': 'বজাৰ',
        'nav.store': 'দোকান',
        'nav.notifications': 'জাননী',
        'nav.get_started': 'আৰম্ভ কৰক',
        'language.choose': 'আপোনাৰ ভাষা বাছক',
    },
    'ne': {
        'nav.features': 'विशेषताहरू',
        'nav.planner': 'योजनाकार',
        'nav.pest_detector': 'कीरा पहिचान',
        'nav.crop_health': 'बाली स्वास्थ्य',
        'nav.weather': 'मौसम',
        'nav.market': 'बजार',
        'nav.store': 'पसल',
        'nav.notifications': 'सूचनाहरू',
        'nav.get_started': 'सुरु गर्नुहोस्',
        'language.choose': 'आफ्नो भाषा छान्नुहोस्',
    },
    'si': {
        'nav.features': 'විශේෂාංග',
        'nav.planner': 'සැලසුම්කරු',
        'nav.pest_detector': 'පළිබෝධ හඳුනාගැනීම',
        'nav.crop_health': 'බෝග සෞඛ්‍යය',
        'nav.weather': 'කාලගුණය',
        'nav.market': 'වෙළඳපොළ',
        'nav.store': 'සාප්පුව',
        'nav.notifications': 'දැනුම්දීම්',
        'nav.get_started': 'ආරම්භ කරන්න',
        'language.choose': 'ඔබේ භාෂාව තෝරන්න',
    },
    'ur': {
        'nav.features': 'خصوصیات',
        'nav.planner': 'منصوبہ ساز',
        'nav.pest_detector': 'کیڑوں کی شناخت',
        'nav.crop_health': 'فصل کی صحت',
        'nav.weather': 'موسم',
        'nav.market': 'منڈی',
        'nav.store': 'اسٹور',
        'nav.notifications': 'اطلاعات',
        'nav.get_started': 'شروع کریں',
        'language.choose': 'اپنی زبان منتخب کریں',
    },
    'sd': {
        'nav.features': 'خاصيتون',
        'nav.planner': 'رٿابندي',
        'nav.pest_detector': 'جيتن جي سڃاڻپ',
        'nav.crop_health': 'فصل جي صحت',
        'nav.weather': 'موسم',
        'nav.market': 'منڊي',
        'nav.store': 'دڪان',
        'nav.notifications': 'اطلاعون',
        'nav.get_started': 'شروع ڪريو',
        'language.choose': 'پنهنجي ٻولي چونڊيو',
    },
    'dv': {
        'nav.features': 'ފީޗަރސް',
        'nav.planner': 'ޕްލޭނަރ',
        'nav.pest_detector': 'ފަނި ދެނެގަތުން',
        'nav.crop_health': 'ދަނޑުވެރިކަމުގެ ސިއްހަތު',
        'nav.weather': 'މޫސުން',
        'nav.market': 'ބާޒާރު',
        'nav.store': 'ފިހާރަ',
        'nav.notifications': 'ނޮޓިފިކޭޝަން',
        'nav.get_started': 'ފަށާ',
        'language.choose': 'ތިބާގެ ބަސް ޚިޔާރުކުރޭ',
    },
    'bho': {
        'nav.features': 'विशेषता',
        'nav.planner': 'योजनाकार',
        'nav.pest_detector': 'कीड़ा पहचान',
        'nav.crop_health': 'फसल के सेहत',
        'nav.weather': 'मौसम',
        'nav.market': 'बाजार',
        'nav.store': 'दोकान',
        'nav.notifications': 'सूचना',
        'nav.get_started': 'शुरू करीं',
        'language.choose': 'आपन भाषा चुनीं',
    },
}


def normalize_language(code):
    return code if code in LANGUAGE_CODES else DEFAULT_LANGUAGE


def translate(key, language=DEFAULT_LANGUAGE):
    catalog = CATALOGS.get(language, {})
    if key in catalog:
        return catalog[key]
    return CATALOGS[DEFAULT_LANGUAGE].get(key, key)
