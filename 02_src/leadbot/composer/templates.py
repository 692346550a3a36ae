"""Message templates and answer display labels."""

from ..models import Prompt

DIVIDER = "━━━━━━━━━━━━━━━━━━━"

TEMPLATES: dict[Prompt, str] = {
    Prompt.WELCOME: f"""🎁 *Welcome to VihaCandlesAndGiftings!* 🎁

To serve you better, we have *5 quick questions* for you.

Are you looking for return gifts for your function?

{DIVIDER}
1️⃣ → Yes, I need return gifts
2️⃣ → No
{DIVIDER}

Reply with *1* or *2*""",
    Prompt.TIMING: f"""⏰ *When do you need the return gifts delivered?*

{DIVIDER}
1️⃣ → Within 1 week
2️⃣ → Within 2 weeks
3️⃣ → Within 3 weeks
4️⃣ → More than 3 weeks
{DIVIDER}

Reply with *1, 2, 3* or *4*""",
    Prompt.BUDGET: f"""💰 *What's your budget range?*

{DIVIDER}
1️⃣ → Under ₹50
2️⃣ → ₹51 - ₹100
3️⃣ → ₹101 - ₹150
4️⃣ → ₹151 - ₹200
5️⃣ → More than ₹200
{DIVIDER}

Reply with *1, 2, 3, 4* or *5*""",
    Prompt.QUANTITY: f"""🧮 *How many pieces do you need?*

{DIVIDER}
1️⃣ → Less than 30 pieces
2️⃣ → 30 - 50 pieces
3️⃣ → 51 - 100 pieces
4️⃣ → 101 - 150 pieces
5️⃣ → More than 150 pieces
{DIVIDER}

Reply with *1, 2, 3, 4* or *5*""",
    Prompt.LOCATION: "📍 *Your delivery location please (City/Area)?*",
    Prompt.NOT_INTERESTED: """Then, Shall we know why you have contacted us? Do you have any return gifts requirement? If so, you will get

🎁 Get *FLAT ₹250 DISCOUNT* on your first purchase with us on 50 pieces MOQ.

This offer is valid only till tomorrow

If interested in above offer, please reply us. Our team will talk to you within 30 mins.""",
    Prompt.HUMAN_HANDOFF: """We understand you may need personalized assistance. Our team will reach out to you shortly to help with your return gift requirements.

Thank you for your patience! 🙏""",
    Prompt.ERROR_START: "❌ Please reply with *1* or *2*",
    Prompt.ERROR_FUNCTION_TIME: "❌ Please reply with *1, 2, 3* or *4*",
    Prompt.ERROR_BUDGET: "❌ Please reply with *1, 2, 3, 4* or *5*",
    Prompt.ERROR_PIECE_COUNT: "❌ Please reply with *1, 2, 3, 4* or *5*",
    Prompt.GENERIC_ERROR: 'Sorry, something went wrong. Please try again or type "hello" to restart.',
    Prompt.BOT_REENABLED: "Bot has been re-enabled for this chat.",
    Prompt.THANK_YOU: """✅ *Thank you for your interest!*

Our team will talk to you. 😊""",
    Prompt.CATALOG_CLOSING: """If you are interested in any of these products, please let us know.

Our team will give you complete details. 😊""",
}

CATALOG_INTRO = "🎁 *Here are our return gifts under {label}:*"

CATALOG_FALLBACK = """🎁 *Return Gifts Under {label}*

We have various beautiful return gift options under {label}. Our team will contact you with the complete catalog and images.

""" + TEMPLATES[Prompt.CATALOG_CLOSING]

NOT_SPECIFIED = "Not specified"

TIMING_LABELS = {
    "1": "Within 1 week",
    "2": "Within 2 weeks",
    "3": "Within 3 weeks",
    "4": "After 3 weeks",
}

BUDGET_LABELS = {
    "1": "Under ₹50",
    "2": "₹51 - ₹100",
    "3": "₹101 - ₹150",
    "4": "₹151 - ₹200",
    "5": "More than ₹200",
}

QUANTITY_LABELS = {
    "1": "Less than 30 pieces",
    "2": "30 - 50 pieces",
    "3": "51 - 100 pieces",
    "4": "101 - 150 pieces",
    "5": "More than 150 pieces",
}
