import pytest

from e2e_suites.ui_testing.pages import HomePage, HomeSection, HomeSelectors


@pytest.fixture
def home_page(fake_page) -> HomePage:
    return HomePage(fake_page, "http://localhost:3000")


@pytest.mark.asyncio
async def test_home_page_loaded(home_page, fake_page):
    assert await home_page.is_home_page_loaded() is False

    fake_page.show(HomeSelectors.HERO_SECTION, HomeSelectors.HERO_TITLE)
    assert await home_page.is_home_page_loaded() is True


@pytest.mark.asyncio
async def test_navigate_to_home(home_page, fake_page):
    await home_page.navigate_to_home()
    assert fake_page.url == "http://localhost:3000/"


@pytest.mark.asyncio
async def test_hero_text(home_page, fake_page):
    fake_page.show(HomeSelectors.HERO_TITLE, text="Build faster")
    fake_page.show(HomeSelectors.HERO_SUBTITLE)

    assert await home_page.get_hero_title() == "Build faster"
    assert await home_page.get_hero_subtitle() == ""


@pytest.mark.asyncio
async def test_feature_cards(home_page, fake_page):
    fake_page.show(HomeSelectors.FEATURES_SECTION)
    fake_page.items[HomeSelectors.FEATURE_CARD.value] = [
        {
            HomeSelectors.FEATURE_TITLE.value: " Fast ",
            HomeSelectors.FEATURE_DESCRIPTION.value: "Runs in parallel",
        },
        {HomeSelectors.FEATURE_TITLE.value: "Typed"},
    ]

    cards = await home_page.get_feature_cards()

    assert cards == [
        {"title": "Fast", "description": "Runs in parallel"},
        {"title": "Typed", "description": None},
    ]


@pytest.mark.asyncio
async def test_verify_main_sections(home_page, fake_page):
    fake_page.show(HomeSelectors.HERO_SECTION, HomeSelectors.CTA_SECTION)

    assert await home_page.verify_main_sections() == {
        "hero": True,
        "features": False,
        "about": False,
        "services": False,
        "cta": True,
    }


@pytest.mark.asyncio
async def test_scroll_to_section(home_page, fake_page):
    await home_page.scroll_to_section("about")
    await home_page.scroll_to_section(HomeSection.CTA)

    assert fake_page.actions == [
        ("scroll", HomeSelectors.ABOUT_SECTION.value),
        ("wait_for_timeout", 500),
        ("scroll", HomeSelectors.CTA_SECTION.value),
        ("wait_for_timeout", 500),
    ]


@pytest.mark.asyncio
async def test_scroll_to_unknown_section(home_page):
    with pytest.raises(ValueError, match="Unknown section: pricing"):
        await home_page.scroll_to_section("pricing")


@pytest.mark.asyncio
async def test_page_metadata(home_page, fake_page):
    fake_page.title_text = "Home"

    assert await home_page.get_page_metadata() == {
        "title": "Home",
        "url": "http://localhost:3000/",
        "description": None,
    }

    fake_page.attributes[(HomeSelectors.META_DESCRIPTION.value, "content")] = "Landing page"
    assert (await home_page.get_page_metadata())["description"] == "Landing page"


@pytest.mark.asyncio
async def test_primary_cta_scrolls_before_click(home_page, fake_page):
    fake_page.show(HomeSelectors.PRIMARY_CTA_BUTTON)

    await home_page.click_primary_cta()

    assert fake_page.actions == [
        ("scroll", HomeSelectors.PRIMARY_CTA_BUTTON.value),
        ("click", HomeSelectors.PRIMARY_CTA_BUTTON.value),
    ]
