from enum import unique

import pytest
from playwright.async_api import TimeoutError as PlaywrightTimeoutError

from e2e_suites.ui_testing.framework import Region, SelectorTable
from e2e_tools.common import Timeouts


@unique
class CardSelectors(SelectorTable):
    CARD = ".card"
    TITLE = ".card-title"
    BUTTON = ".card-button"
    ITEMS = ".card-items"
    INPUT = ".card-input"


@unique
class OtherSelectors(SelectorTable):
    TITLE = ".other-title"


@pytest.fixture
def region(fake_page) -> Region:
    return Region(fake_page, CardSelectors, root=CardSelectors.CARD.value)


def test_root_selector_is_read_only(region):
    assert region.root_selector == ".card"
    with pytest.raises(AttributeError):
        region.root_selector = ".other"


def test_locate_rejects_foreign_keys(region):
    with pytest.raises(TypeError):
        region.locate(OtherSelectors.TITLE)
    with pytest.raises(TypeError):
        region.locate(".card-title")


@pytest.mark.asyncio
async def test_visibility_probes_never_raise(region, fake_page):
    assert await region.is_visible() is False
    assert await region.is_element_visible(CardSelectors.TITLE) is False

    fake_page.show(CardSelectors.CARD, CardSelectors.TITLE)
    assert await region.is_visible() is True
    assert await region.is_element_visible(CardSelectors.TITLE) is True


@pytest.mark.asyncio
async def test_probe_waits_for_late_elements(region, fake_page):
    fake_page.delayed[CardSelectors.TITLE.value] = 0.02

    assert await region.is_element_visible(CardSelectors.TITLE, timeout=1000) is True


@pytest.mark.asyncio
async def test_probe_gives_up_after_timeout(region, fake_page):
    fake_page.delayed[CardSelectors.TITLE.value] = 5

    assert await region.is_element_visible(CardSelectors.TITLE, timeout=20) is False


@pytest.mark.asyncio
async def test_visibility_check_default_comes_from_timeouts(fake_page):
    fake_page.delayed[CardSelectors.TITLE.value] = 0.1

    impatient = Region(fake_page, CardSelectors, timeouts=Timeouts(probe=20))
    assert await impatient.is_element_visible(CardSelectors.TITLE) is False
    assert await impatient.get_optional_text(CardSelectors.TITLE) is None

    patient = Region(fake_page, CardSelectors, timeouts=Timeouts(probe=1000))
    assert await patient.is_element_visible(CardSelectors.TITLE) is True


@pytest.mark.asyncio
async def test_blocking_wait_default_comes_from_timeouts(fake_page):
    fake_page.delayed[CardSelectors.BUTTON.value] = 0.1
    region = Region(fake_page, CardSelectors, timeouts=Timeouts(element=20))

    with pytest.raises(PlaywrightTimeoutError, match="Timeout 20ms"):
        await region.wait_for_element(CardSelectors.BUTTON)


@pytest.mark.asyncio
async def test_blocking_wait_propagates_timeout(region):
    with pytest.raises(PlaywrightTimeoutError):
        await region.wait_for_element(CardSelectors.BUTTON, timeout=10)
    with pytest.raises(PlaywrightTimeoutError):
        await region.wait_for_visible(timeout=10)


@pytest.mark.asyncio
async def test_unscoped_region_is_always_visible(fake_page):
    page_region = Region(fake_page, CardSelectors)

    assert page_region.root() is fake_page
    assert await page_region.is_visible() is True
    await page_region.wait_for_visible()
    with pytest.raises(ValueError):
        await page_region.evaluate_root("el => el.id")


@pytest.mark.asyncio
async def test_optional_text(region, fake_page):
    assert await region.get_optional_text(CardSelectors.TITLE) is None

    fake_page.show(CardSelectors.TITLE, text="Hello")
    assert await region.get_optional_text(CardSelectors.TITLE) == "Hello"


@pytest.mark.asyncio
async def test_get_text_defaults_to_empty(region):
    assert await region.get_text(CardSelectors.TITLE) == ""


@pytest.mark.asyncio
async def test_actions_are_delegated(region, fake_page):
    await region.click(CardSelectors.BUTTON)
    await region.fill(CardSelectors.INPUT, "value")
    await region.press(CardSelectors.INPUT, "Enter")
    await region.set_checked(CardSelectors.INPUT, True)

    assert fake_page.actions == [
        ("click", ".card-button"),
        ("fill", ".card-input", "value"),
        ("press", ".card-input", "Enter"),
        ("set_checked", ".card-input", True),
    ]
    assert await region.input_value(CardSelectors.INPUT) == "value"
    assert await region.is_checked(CardSelectors.INPUT) is True


@pytest.mark.asyncio
async def test_texts_strips_and_drops_blank_entries(region, fake_page):
    fake_page.all_texts["li"] = ["  one ", "", "   ", "two"]

    assert await region.texts(CardSelectors.ITEMS, "li") == ["one", "two"]


@pytest.mark.asyncio
async def test_visibility_map(region, fake_page):
    fake_page.show(CardSelectors.TITLE)

    result = await region.visibility_map({"title": CardSelectors.TITLE, "button": CardSelectors.BUTTON})

    assert result == {"title": True, "button": False}


@pytest.mark.asyncio
async def test_root_geometry(region, fake_page):
    fake_page.boxes[".card"] = {"x": 0, "y": 0, "width": 100, "height": 40}
    fake_page.evaluations[".card"] = "sticky"

    assert (await region.root_bounding_box())["height"] == 40
    assert await region.evaluate_root("el => getComputedStyle(el).position") == "sticky"
