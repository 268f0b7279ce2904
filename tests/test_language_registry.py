"""
Tests for LanguageRegistry
"""
import pytest

from translation_service.core.exceptions import (
    BusinessRuleError,
    ConflictError,
    NotFoundError,
    ValidationError,
)
from translation_service.models.language import Language
from translation_service.services.language_registry import (
    ACTIVE_LANGUAGES_CACHE_KEY,
    LanguageRegistry,
)

from conftest import FakeCache


@pytest.fixture
def fake_cache():
    return FakeCache()


@pytest.fixture
def registry(db_session, fake_cache):
    return LanguageRegistry(db_session, cache=fake_cache)


def defaults(db_session):
    db_session.expire_all()
    return [l.code for l in db_session.query(Language).filter(Language.is_default.is_(True)).all()]


def test_create_language(registry):
    language = registry.create({
        "code": "es",
        "name": "Spanish",
        "local_name": "Español",
        "flag": "🇪🇸",
        "metadata": {"direction": "ltr", "currency": "EUR"},
    })
    
    assert language.code == "es"
    assert language.status == "active"
    assert language.is_default is False
    assert language.language_metadata["currency"] == "EUR"


def test_create_defaults_local_name_to_name(registry):
    language = registry.create({"code": "de", "name": "German"})
    assert language.local_name == "German"


def test_create_rejects_invalid_data(registry):
    with pytest.raises(ValidationError) as exc_info:
        registry.create({"code": "xyz", "name": ""})
    assert len(exc_info.value.errors) == 2


def test_create_rejects_duplicate_code(registry, spanish):
    with pytest.raises(ConflictError):
        registry.create({"code": "es", "name": "Spanish again"})


def test_new_default_replaces_previous(registry, db_session):
    registry.create({"code": "en", "name": "English", "is_default": True})
    registry.create({"code": "fr", "name": "French", "is_default": True})
    
    assert defaults(db_session) == ["fr"]


def test_update_to_default_replaces_previous(registry, db_session, english, spanish):
    registry.update("es", {"is_default": True})
    
    assert defaults(db_session) == ["es"]


def test_update_existing_default_keeps_it(registry, db_session, english):
    registry.update("en", {"is_default": True, "name": "English (US)"})
    
    assert defaults(db_session) == ["en"]
    assert registry.get_by_code("en").name == "English (US)"


def test_update_merges_metadata(registry, language_factory):
    language_factory("ar", "Arabic", metadata={"direction": "rtl"})
    language = registry.update("ar", {"metadata": {"currency": "SAR"}})
    
    assert language.language_metadata == {"direction": "rtl", "currency": "SAR"}
    assert language.direction == "rtl"


def test_update_missing_language(registry):
    with pytest.raises(NotFoundError):
        registry.update("zz", {"name": "Nothing"})


def test_update_validates_patch(registry, spanish):
    with pytest.raises(ValidationError):
        registry.update("es", {"status": "gone"})


def test_get_by_code_and_id(registry, spanish):
    assert registry.get_by_code("es").name == "Spanish"
    assert registry.get_by_id("es").name == "Spanish"
    with pytest.raises(NotFoundError):
        registry.get_by_code("zz")


def test_list_active(registry, language_factory):
    language_factory("es", "Spanish")
    language_factory("fr", "French", status="inactive")
    
    assert [l.code for l in registry.list_active()] == ["es"]


def test_active_languages_are_cached(registry, fake_cache, spanish):
    first = registry.get_active_languages()
    
    assert first[0]["code"] == "es"
    assert first[0]["localName"] == "Español"
    assert fake_cache.get(ACTIVE_LANGUAGES_CACHE_KEY) == first


def test_mutation_invalidates_language_cache(registry, fake_cache, spanish):
    registry.get_active_languages()
    registry.create({"code": "it", "name": "Italian"})
    
    assert fake_cache.get(ACTIVE_LANGUAGES_CACHE_KEY) is None
    assert {l["code"] for l in registry.get_active_languages()} == {"es", "it"}


def test_list_paged_and_search(registry, language_factory):
    language_factory("es", "Spanish", local_name="Español")
    language_factory("fr", "French", local_name="Français")
    language_factory("de", "German", local_name="Deutsch")
    
    languages, total = registry.list_paged(page=1, limit=2)
    assert total == 3
    assert len(languages) == 2
    
    languages, total = registry.list_paged(search="fren")
    assert total == 1
    assert languages[0].code == "fr"
    
    assert [l.code for l in registry.search("deutsch")] == ["de"]
    assert registry.count() == 3


def test_delete_language(registry, db_session, spanish):
    registry.delete("es", has_translations=False)
    
    assert registry.find_by_code("es") is None


def test_delete_default_language_rejected(registry, english):
    with pytest.raises(BusinessRuleError):
        registry.delete("en", has_translations=False)


def test_delete_language_with_translations_rejected(registry, spanish):
    with pytest.raises(BusinessRuleError):
        registry.delete("es", has_translations=True)


def test_delete_missing_language(registry):
    with pytest.raises(NotFoundError):
        registry.delete("zz", has_translations=False)


def test_code_is_stored_lower_case(registry):
    language = registry.create({"code": "ES", "name": "Spanish"})
    
    assert language.code == "es"
    assert registry.get_by_code("es") is language
    assert registry.get_by_code("ES") is language
    with pytest.raises(ConflictError):
        registry.create({"code": "es", "name": "Spanish"})
