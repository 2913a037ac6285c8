from selenium import webdriver
from selenium.webdriver.chrome.options import Options
from selenium.webdriver.chrome.service import Service
from selenium.webdriver.chrome.webdriver import WebDriver
from webdriver_manager.chrome import ChromeDriverManager

CLIPBOARD_ALLOW = 1


def new_webdriver(headless: bool = True) -> WebDriver:
    """Start a Chrome session that is allowed to write to the clipboard."""
    options = Options()
    options.page_load_strategy = "eager"
    options.add_argument("--disable-extensions")
    options.add_argument("--start-maximized")
    options.add_argument("--accept-language=en-US,en;q=0.9")
    options.add_experimental_option("excludeSwitches", ["enable-automation"])
    options.add_experimental_option("prefs", {
        "profile.default_content_setting_values.clipboard": CLIPBOARD_ALLOW,
    })

    if headless:
        options.add_argument("--headless=new")
        options.add_argument("--window-size=1900,1080")

    return webdriver.Chrome(service=Service(ChromeDriverManager().install()), options=options)
