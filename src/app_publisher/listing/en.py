"""English listing writer."""

from __future__ import annotations

from app_publisher.listing.base import ListingWriter, Phrases
from app_publisher.models import Language

PHRASES = Phrases(
    list_separator=", ",
    default_keywords=("app", "mobile", "utility", "simple", "daily"),
    tagline="Simple and smart",
    short_template="{name} helps you get more done every day with a clean, simple design.",
    promo_template="Meet {name}. {tagline}, built for your everyday life.",
    intro_template="Welcome to {name}!",
    features_heading="KEY FEATURES",
    version_template="Version {version}",
    cross_platform_note="Available on both iPhone and Android devices.",
    ads_notice="This app contains advertisements.",
    iap_notice="Some features are available through in-app purchases.",
    closing="Have questions or feedback? Reach us through the support page. We read every message.",
    support_title="{name} Support",
    support_intro="Thank you for using {name}. If something is not working, we are happy to help.",
    contact_heading="Contact",
    contact_line="Email: {email}",
    faq_heading="Frequently Asked Questions",
    faq_general_q="The app is not working as expected. What should I do?",
    faq_general_a=(
        "Update to the latest version and restart the app. If the problem continues, "
        "email us with your device model and OS version."
    ),
    faq_iap_q="How do I restore my purchases?",
    faq_iap_a=(
        "Open the settings screen and tap \"Restore Purchases\" while signed in to the "
        "same App Store or Google Play account you used to buy."
    ),
    faq_account_q="How do I delete my account?",
    faq_account_a=(
        "Use \"Delete Account\" on the settings screen, or email us at {email} and we "
        "will remove your account and its data."
    ),
    faq_ads_q="Why do I see ads?",
    faq_ads_a="Ads help us keep {name} free. We try to keep them unobtrusive.",
    current_version="Current version: {version}",
    privacy_title="{name} Privacy Policy",
    effective_date="Effective date: [YYYY-MM-DD]",
    privacy_intro="This policy explains what information {name} handles and how it is used.",
    no_data_collected=(
        "{name} does not collect personal information. Everything you enter stays on "
        "your device and is never sent to us or to third parties."
    ),
    collected_heading="Information We Collect",
    collect_auth="Account information, such as your email address, when you sign in",
    collect_analytics="Anonymous usage statistics and crash reports that help us improve the app",
    collect_iap=(
        "Purchase records processed by the App Store or Google Play. We never see your "
        "payment details."
    ),
    collect_ugc="Content you upload or post in the app",
    collect_chat="Messages you exchange with other users",
    collect_ads=(
        "Your device's advertising identifier (IDFA on iOS, Advertising ID on Android), "
        "used to show ads. You can reset or limit it in your device settings."
    ),
    third_party_notice=(
        "Some of this information is processed by third-party services, which have "
        "their own privacy policies."
    ),
    permissions_heading="Device Permissions",
    permissions_intro="The app requests these permissions only when you use the related feature:",
    children_heading="Children's Privacy",
    children_notice=(
        "{name} is not directed at children under 13 and does not knowingly collect "
        "their personal information."
    ),
    changes_heading="Changes to This Policy",
    changes_notice="We may update this policy from time to time. Changes take effect when posted here.",
    privacy_contact="Questions about this policy? Contact us at {email}.",
    review_title="App Review Notes",
    review_summary="{name} (version {version})",
    review_demo_account="Demo account for review:\nEmail: [demo@example.com]\nPassword: [password]",
    review_no_login="No login is required. All features are available right after launch.",
    review_iap="In-app purchases can be tested with a sandbox account.",
    review_webview=(
        "Some screens display web content inside the app. This content is part of our "
        "own service, not a general-purpose browser."
    ),
    review_moderation=(
        "Users can report objectionable content and block abusive users. Reports are "
        "reviewed within 24 hours."
    ),
    review_permissions="Permissions used:",
    review_contact="Contact for review questions: {email}",
    answer_yes="Yes",
    answer_no="No",
    answer_none="None",
    answer_mild="Infrequent/Mild",
    rating_guide_title="Google Play Content Rating Guide",
    rating_guide_intro="Suggested answers for the IARC questionnaire. Check each one before submitting.",
    q_violence="Does the app contain violence?",
    q_sexuality="Does the app contain sexual content or nudity?",
    q_language="Does the app contain profanity or crude humor?",
    q_substances="Does the app reference drugs, alcohol or tobacco?",
    q_gambling="Does the app contain real or simulated gambling?",
    q_interaction="Can users interact or exchange content with each other?",
    q_location="Does the app share the user's location with other users?",
    q_purchases="Does the app sell digital goods?",
    q_ads="Does the app contain ads?",
    q_loot_box="Does the app sell randomized items (loot boxes)?",
    age_title="App Store Age Rating Questionnaire",
    age_intro="Suggested answers based on the project files.",
    age_cartoon_violence="Cartoon or Fantasy Violence",
    age_realistic_violence="Realistic Violence",
    age_sexual_content="Sexual Content or Nudity",
    age_profanity="Profanity or Crude Humor",
    age_substances="Alcohol, Tobacco, or Drug Use or References",
    age_mature_themes="Mature/Suggestive Themes",
    age_horror="Horror/Fear Themes",
    age_medical="Medical/Treatment Information",
    age_gambling="Simulated Gambling",
    age_web_access="Unrestricted Web Access",
    age_ugc="User-Generated Content",
    age_chat="Messaging and Chat",
    age_loot_box="Loot Boxes",
    age_expected="Expected rating: {rating}",
    age_manual_review="Answers marked None were not detected automatically. Verify them manually.",
)


class EnglishWriter(ListingWriter):
    language = Language.EN
    phrases = PHRASES
