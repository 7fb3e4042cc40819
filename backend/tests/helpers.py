"""Sample site content shared by the tests."""

ADMIN_PASSWORD = "correct horse battery staple"
TOKEN_SECRET = "test-token-secret-0123456789abcdef0123456789"

NAV_HTML = (
    '<ul id="primary-menu" class="menu">'
    '<li id="menu-item-home" class="menu-item"><a href="index.html">Home</a></li>\n'
    '<li id="menu-item-about" class="menu-item menu-item-has-children">'
    '<a href="about/index.html">About Us</a>\n'
    '<ul class="sub-menu">'
    '<li id="menu-item-team" class="menu-item"><a href="our-team.html">Our Team</a></li>'
    "</ul>\n"
    "</li></ul>"
)

PAGE_TEMPLATE = """<!DOCTYPE html>
<html lang="{lang}">
<head>
<title>{title}</title>
<meta name="description" content="Consumer protection attorneys">
</head>
<body>
<header>
<nav class="site-nav">
{nav}
<div class="contact-links"><a href="tel:+12125550100">Call us</a></div>
</nav>
</header>
<h1>{heading}</h1>
<main><div class="entry-content"><p>We fight for consumers.</p></div></main>
<div class="wp-block-normand-banner">
<p class="banner-subtitle">Normand PLLC</p>
<h2 class="banner-title"><span class="rotation-text-1">Fighting for you</span></h2>
<div class="scroll-indicator"><span>Scroll</span></div>
</div>
<div class="wp-block-normand-contact" style="margin: 0">
<p class="normand-contact--subtitle">Reach out</p>
<h2 class="normand-contact--title">Contact us</h2>
<p class="normand-contact--form-note">We reply within a day.</p>
</div>
</body>
</html>
"""


def render_page(
    lang: str = "en", title: str = "Normand PLLC", heading: str = "Welcome", nav: str = NAV_HTML
) -> str:
    """A full site page with the given navigation markup."""
    return PAGE_TEMPLATE.format(lang=lang, title=title, heading=heading, nav=nav)


def menu_document() -> dict:
    """Menu document matching NAV_HTML."""
    return {
        "mainMenu": [
            {"id": "menu-item-home", "title": "Home", "url": "/", "order": 1, "children": []},
            {
                "id": "menu-item-about",
                "title": "About Us",
                "url": "/about/",
                "order": 2,
                "children": [
                    {
                        "id": "menu-item-team",
                        "title": "Our Team",
                        "url": "/our-team/",
                        "order": 1,
                        "children": [],
                    }
                ],
            },
        ],
        "lastUpdated": "2024-01-01T00:00:00+00:00",
    }
