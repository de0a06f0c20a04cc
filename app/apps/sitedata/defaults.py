"""
Default site content

Served to clients when no document has been stored yet, and used as the
base that stored documents are merged onto so fields added after a
document was saved still have a value.
"""
import copy
from typing import Any, Dict

ASSET_PREFIX = "/assets/"

HERO_BG = ASSET_PREFIX + "hero-bg.jpg"
ABOUT_AWARD = ASSET_PREFIX + "about-award.jpg"
INDIAN_CUISINE = ASSET_PREFIX + "indian-cuisine.jpg"
SOUTH_INDIAN = ASSET_PREFIX + "south-indian.jpg"
PUNJABI_CUISINE = ASSET_PREFIX + "punjabi-cuisine.jpg"
ITALIAN_CUISINE = ASSET_PREFIX + "italian-cuisine.jpg"
CHINESE_CUISINE = ASSET_PREFIX + "chinese-cuisine.jpg"
FESTIVE_CATERING = ASSET_PREFIX + "festive-catering.jpg"
WEDDING_CATERING = ASSET_PREFIX + "wedding-catering.jpg"
CORPORATE_CATERING = ASSET_PREFIX + "corporate-catering.jpg"
GALLERY_1 = ASSET_PREFIX + "gallery-1.jpg"
GALLERY_2 = ASSET_PREFIX + "gallery-2.jpg"

# Top-level keys holding a section record
SECTION_KEYS = (
    "hero",
    "about",
    "brandSection",
    "services",
    "menu",
    "detailedMenu",
    "whyChooseUs",
    "gallery",
    "ourWorkPage",
    "testimonials",
    "contact",
    "footer",
)

_MENU_BLURB = (
    "From house parties to corporate events, we bring flavors and sophistication "
    "that make every moment unforgettable."
)

DEFAULT_SITE_DATA: Dict[str, Any] = {
    "siteName": "Vikas Caterings",
    "tagline": "Simple As Traditional",
    "useLogo": False,
    "logoUrl": "",
    "phone": "090584 81865",
    "email": "info@vikascaterings.com",
    "address": "306, Sector 15-B, Kar Kunj Chauraha, Avas Vikas Colony, Sikandra, Agra, Uttar Pradesh 282007",

    "hero": {
        "welcomeText": "Welcome to Shree Vishnu Caterers",
        "heading": "Premium Catering Services for Weddings, Corporate Events & Parties",
        "description": (
            "From house parties to corporate events, we serve flavors and elegance "
            "that turn every occasion into a memorable experience."
        ),
        "ctaText": "Discover Our Menu",
        "backgroundImage": HERO_BG,
        "videoUrl": "",
    },

    "about": {
        "heading": "Award-Winning Caterers in India for Weddings, Corporate Events & Grand Celebrations",
        "paragraphs": [
            "With over 10 years of great catering services, Vikas Caterings has become known "
            "around North India for turning events into special food experiences. Our "
            "award-winning team combines real flavors, creative displays, and outstanding "
            "service to make every celebration better.",
            "From top weddings to important business events, we offer carefully chosen menus, "
            "fresh ingredients, and smooth service. Serving Agra, Mathura, Gwalior, Noida, "
            "Delhi, Gurugram, and nearby areas, we are proud to create memorable dining "
            "experiences for every event.",
        ],
        "image": ABOUT_AWARD,
        "ctaText": "Book Now",
    },

    "brandSection": {
        "name": "Vikas Caterings",
        "subtitle": "Authentic Indian Catering for Every Celebration",
        "description": (
            "At Vikas Caterings, we serve authentic Indian dishes, fresh ingredients, and "
            "flawless service for weddings, birthdays, kitty parties, and corporate events. "
            "Our expert team customizes every menu to your taste."
        ),
        "ctaText": "Book Now",
    },

    "services": {
        "sectionTitle": "India's Leading Caterer for Every Occasion",
        "sectionSubtitle": "",
        "description": (
            "Every event is unique and deserves exceptional catering. Our services are "
            "designed to create memorable experiences, whether it's a grand wedding, a "
            "corporate gathering, or an intimate birthday party."
        ),
        "items": [
            {
                "title": "Festive Gathering Catering",
                "description": "Authentic festive catering for Diwali, Holi, Eid, and more.",
                "image": FESTIVE_CATERING,
            },
            {
                "title": "Wedding Catering",
                "description": "Premium wedding catering with authentic flavors and elegant presentation.",
                "image": WEDDING_CATERING,
            },
            {
                "title": "Corporate Events",
                "description": "Professional catering for conferences, meetings, and corporate gatherings.",
                "image": CORPORATE_CATERING,
            },
        ],
    },

    "menu": {
        "sectionLabel": "WHAT WE OFFER",
        "sectionTitle": "Explore The Menu",
        "items": [
            {"title": "Indian Cuisine", "description": _MENU_BLURB, "image": INDIAN_CUISINE},
            {"title": "South Indian Cuisine", "description": _MENU_BLURB, "image": SOUTH_INDIAN},
            {"title": "Punjabi Cuisine", "description": _MENU_BLURB, "image": PUNJABI_CUISINE},
            {"title": "Italian Cuisine", "description": _MENU_BLURB, "image": ITALIAN_CUISINE},
            {"title": "Chinese Cuisine", "description": _MENU_BLURB, "image": CHINESE_CUISINE},
        ],
    },

    "detailedMenu": {
        "heroTitle": "Our Menu",
        "heroImage": HERO_BG,
        "categories": [
            {
                "title": "Beverages",
                "images": [INDIAN_CUISINE, SOUTH_INDIAN, PUNJABI_CUISINE, CHINESE_CUISINE],
                "subcategories": [
                    {"name": "Welcome Drinks", "items": ["Mausmi Juice", "Pineapple Juice", "Watermelon Juice"]},
                    {"name": "Creamy Shakes", "items": ["Custard Apple Shake", "Oreo Shake", "Pan Shake"]},
                    {"name": "Hot Beverages", "items": ["Masala Chai", "Coffee"]},
                    {"name": "Soup", "items": ["Tomato Creamy Soup", "Sweet Corn Soup"]},
                    {"name": "Mocktails", "items": ["Mojito", "Guava Marinara"]},
                ],
            },
            {
                "title": "Starters & Snacks",
                "images": [ITALIAN_CUISINE, PUNJABI_CUISINE, GALLERY_1],
                "subcategories": [
                    {
                        "name": "Snacks",
                        "items": [
                            "Paneer Afgani Tikka", "Soya Malai Tikka", "Kabab Hara Bhara",
                            "Spring Roll", "Honey Chilli Potato", "French Fries",
                        ],
                    },
                    {
                        "name": "Chaat Galli",
                        "items": ["Pani Puri", "Aloo Tikki", "Raj Kachori", "Kesar Dahi Bhalla", "Pau Bhaji"],
                    },
                ],
            },
        ],
    },

    "whyChooseUs": {
        "heading": "Why Choose Us",
        "paragraphs": [
            "With years of expertise in the catering industry, we deliver customized culinary "
            "experiences for events of every size.",
            "From live counters and curated menus to flawless presentation and timely service, "
            "we ensure every dish delights your guests.",
        ],
        "points": [
            "Years of Proven Experience",
            "Personalized & Friendly Service",
            "Trained, Skilled, and Professional Staff",
            "Wide Range of Creative Menu Options",
            "Fresh, High-Quality Ingredients",
            "Authentic Local Flavors & International Cuisine",
        ],
    },

    "gallery": {
        "heading": "Explore Our Work",
        "description": _MENU_BLURB,
        "images": [GALLERY_1, GALLERY_2, HERO_BG],
        "ctaText": "Explore Our Gallery",
    },

    "ourWorkPage": {
        "heroTitle": "Explore Our Work",
        "heroMedia": HERO_BG,
        "heroMediaType": "image",
        "galleryHeading": "Explore Our Work",
        "galleryImages": [
            GALLERY_1, GALLERY_2, HERO_BG, ABOUT_AWARD,
            INDIAN_CUISINE, SOUTH_INDIAN, PUNJABI_CUISINE,
            ITALIAN_CUISINE, CHINESE_CUISINE, FESTIVE_CATERING,
            WEDDING_CATERING, CORPORATE_CATERING,
        ],
    },

    "testimonials": {
        "heading": "Our Testimonials",
        "items": [
            {
                "name": "SUMIT SINGH",
                "text": "The way the food was presented for our guests was amazing, everyone loved the taste.",
                "rating": 5,
            },
            {
                "name": "Saurabh Singh Pundhir",
                "text": "Best catering services in this region: taste, decoration and presentation.",
                "rating": 5,
            },
            {
                "name": "Ram Bahadur Singh",
                "text": "The food was amazing, and the service was superb! Many thanks.",
                "rating": 5,
            },
        ],
    },

    "contact": {
        "visitHeading": "Visit Us",
        "officeLabel": "Head Office Address",
        "enquireHeading": "Enquire Now",
        "alternatePhone": "",
    },

    "footer": {
        "description": (
            "Your reliable catering partner for fresh food, exceptional taste, and "
            "professional event service across Agra and nearby cities."
        ),
        "quickLinks": [
            {"label": "About Us", "href": "#about"},
            {"label": "Menu", "href": "#menu"},
            {"label": "Our Work", "href": "#gallery"},
            {"label": "Contact Us", "href": "#contact"},
        ],
        "services": [
            "Wedding Catering",
            "Birthday Catering",
            "Corporate Event Catering",
            "Theme-Based Catering",
            "Live Food Stalls",
        ],
        "socials": [
            {"platform": "instagram", "url": "#"},
            {"platform": "facebook", "url": "#"},
            {"platform": "youtube", "url": "#"},
            {"platform": "whatsapp", "url": "#"},
        ],
    },
}


def get_default_site_data() -> Dict[str, Any]:
    """Return a private copy of the default document."""
    return copy.deepcopy(DEFAULT_SITE_DATA)
