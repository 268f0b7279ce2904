#!/usr/bin/env python3
"""
Seed the standard UI languages, reviewed auth-screen translations,
and warm the translation cache for common UI strings.
Safe to run repeatedly: existing languages and translations are skipped.
"""
import sys
from pathlib import Path

# Add project root to PYTHONPATH
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from translation_service.core.database import engine, Base, SessionLocal
from translation_service.core.exceptions import ConflictError
from translation_service.services.language_registry import LanguageRegistry
from translation_service.services.translation_manager import TranslationManager
from translation_service.services.translation_resolver import TranslationResolver
from translation_service import models  # noqa: F401

LANGUAGES = [
    {
        "code": "en",
        "name": "English",
        "local_name": "English",
        "flag": "🇺🇸",
        "status": "active",
        "is_default": True,
        "metadata": {"direction": "ltr", "region": "US", "currency": "USD", "dateFormat": "MM/DD/YYYY"},
    },
    {
        "code": "es",
        "name": "Spanish",
        "local_name": "Español",
        "flag": "🇪🇸",
        "status": "active",
        "is_default": False,
        "metadata": {"direction": "ltr", "region": "ES", "currency": "EUR", "dateFormat": "DD/MM/YYYY"},
    },
    {
        "code": "fr",
        "name": "French",
        "local_name": "Français",
        "flag": "🇫🇷",
        "status": "active",
        "is_default": False,
        "metadata": {"direction": "ltr", "region": "FR", "currency": "EUR", "dateFormat": "DD/MM/YYYY"},
    },
    {
        "code": "de",
        "name": "German",
        "local_name": "Deutsch",
        "flag": "🇩🇪",
        "status": "active",
        "is_default": False,
        "metadata": {"direction": "ltr", "region": "DE", "currency": "EUR", "dateFormat": "DD.MM.YYYY"},
    },
    {
        "code": "ar",
        "name": "Arabic",
        "local_name": "العربية",
        "flag": "🇸🇦",
        "status": "active",
        "is_default": False,
        "metadata": {"direction": "rtl", "region": "SA", "currency": "SAR", "dateFormat": "DD/MM/YYYY"},
    },
]

# Reviewed translations: original -> {language code: destination}
REVIEWED_TRANSLATIONS = {
    "Welcome": {"en": "Welcome", "es": "Bienvenido", "fr": "Bienvenue", "de": "Willkommen", "ar": "أهلاً وسهلاً"},
    "Login": {"en": "Login", "es": "Iniciar sesión", "fr": "Se connecter", "de": "Anmelden", "ar": "تسجيل الدخول"},
    "Email": {"en": "Email", "es": "Correo electrónico", "fr": "E-mail", "de": "E-Mail", "ar": "البريد الإلكتروني"},
    "Password": {"en": "Password", "es": "Contraseña", "fr": "Mot de passe", "de": "Passwort", "ar": "كلمة المرور"},
}

UI_STRINGS = ["Welcome", "Save", "Cancel", "Delete", "Search", "Settings", "Logout"]


def seed():
    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    try:
        registry = LanguageRegistry(db)
        for data in LANGUAGES:
            try:
                registry.create(data)
                print(f"✅ Language created: {data['code']} ({data['name']})")
            except ConflictError:
                print(f"⏭️  Language exists: {data['code']}")
        
        manager = TranslationManager(db)
        for original, destinations in REVIEWED_TRANSLATIONS.items():
            for code, destination in destinations.items():
                try:
                    manager.create({
                        "original": original,
                        "destination": destination,
                        "language_code": code,
                        "context": {"category": "ui", "module": "auth"},
                        "is_approved": True,
                        "approved_by": "seed",
                    })
                    print(f"✅ Translation created: \"{original}\" → \"{destination}\" ({code})")
                except ConflictError:
                    print(f"⏭️  Translation exists: \"{original}\" ({code})")
        
        resolver = TranslationResolver(db)
        for data in LANGUAGES:
            if data["is_default"]:
                continue
            results = resolver.translate_batch(UI_STRINGS, data["code"], source_language="en")
            new = sum(1 for r in results if not r.from_cache)
            print(f"🌍 {data['code']}: {new} new, {len(results) - new} cached")
        
        print(f"📊 Languages: {registry.count()}, translations: {manager.count()}")
    finally:
        db.close()


if __name__ == "__main__":
    seed()
