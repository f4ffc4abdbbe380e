"""Korean listing writer."""

from __future__ import annotations

from app_publisher.listing.base import ListingWriter, Phrases
from app_publisher.models import Language

PHRASES = Phrases(
    list_separator=", ",
    default_keywords=("앱", "모바일", "유틸리티", "간편", "일상"),
    tagline="간편하고 스마트하게",
    short_template="{name}와 함께 매일의 일을 더 쉽고 빠르게 끝내세요.",
    promo_template="{name}을 만나보세요. {tagline}, 일상을 위한 앱입니다.",
    intro_template="{name}에 오신 것을 환영합니다!",
    features_heading="주요 기능",
    version_template="버전 {version}",
    cross_platform_note="iPhone과 Android 기기에서 모두 사용할 수 있습니다.",
    ads_notice="이 앱에는 광고가 포함되어 있습니다.",
    iap_notice="일부 기능은 인앱 결제를 통해 이용할 수 있습니다.",
    closing="문의나 의견이 있으시면 지원 페이지를 통해 연락해 주세요. 모든 메시지를 확인합니다.",
    support_title="{name} 고객 지원",
    support_intro="{name}을 이용해 주셔서 감사합니다. 문제가 있으면 언제든 도와드리겠습니다.",
    contact_heading="문의",
    contact_line="이메일: {email}",
    faq_heading="자주 묻는 질문",
    faq_general_q="앱이 제대로 동작하지 않아요. 어떻게 해야 하나요?",
    faq_general_a=(
        "최신 버전으로 업데이트한 뒤 앱을 다시 실행해 주세요. 문제가 계속되면 기기 모델과 "
        "OS 버전을 적어 이메일로 보내주세요."
    ),
    faq_iap_q="구매 내역은 어떻게 복원하나요?",
    faq_iap_a="구매할 때 사용한 App Store 또는 Google Play 계정으로 로그인한 상태에서 설정 화면의 \"구매 복원\"을 눌러주세요.",
    faq_account_q="계정은 어떻게 삭제하나요?",
    faq_account_a="설정 화면의 \"계정 삭제\"를 이용하거나 {email}로 요청하시면 계정과 데이터를 삭제해 드립니다.",
    faq_ads_q="광고는 왜 표시되나요?",
    faq_ads_a="광고 수익으로 {name}을 무료로 제공하고 있습니다. 방해되지 않도록 노력하겠습니다.",
    current_version="현재 버전: {version}",
    privacy_title="{name} 개인정보 처리방침",
    effective_date="시행일: [YYYY-MM-DD]",
    privacy_intro="본 방침은 {name}이 어떤 정보를 어떻게 처리하는지 설명합니다.",
    no_data_collected=(
        "{name}은 개인정보를 수집하지 않습니다. 입력한 모든 데이터는 기기에만 저장되며 "
        "개발자나 제3자에게 전송되지 않습니다."
    ),
    collected_heading="수집하는 정보",
    collect_auth="로그인 시 이메일 주소 등 계정 정보",
    collect_analytics="앱 개선을 위한 익명 사용 통계 및 오류 보고",
    collect_iap="App Store 또는 Google Play에서 처리되는 구매 기록 (결제 정보는 전달받지 않습니다)",
    collect_ugc="앱에 업로드하거나 게시한 콘텐츠",
    collect_chat="다른 사용자와 주고받은 메시지",
    collect_ads=(
        "광고 표시를 위한 기기 광고 식별자 (iOS의 IDFA, Android의 광고 ID). 기기 설정에서 "
        "재설정하거나 제한할 수 있습니다."
    ),
    third_party_notice="일부 정보는 자체 개인정보 처리방침을 가진 제3자 서비스에서 처리됩니다.",
    permissions_heading="기기 권한",
    permissions_intro="앱은 관련 기능을 사용할 때에만 다음 권한을 요청합니다:",
    children_heading="아동의 개인정보",
    children_notice="{name}은 만 14세 미만 아동을 대상으로 하지 않으며 아동의 개인정보를 고의로 수집하지 않습니다.",
    changes_heading="방침의 변경",
    changes_notice="본 방침은 변경될 수 있으며, 변경 사항은 이 페이지에 게시되는 즉시 효력이 발생합니다.",
    privacy_contact="본 방침에 관한 문의: {email}",
    review_title="앱 심사 노트",
    review_summary="{name} (버전 {version})",
    review_demo_account="심사용 데모 계정:\n이메일: [demo@example.com]\n비밀번호: [password]",
    review_no_login="로그인 없이 실행 직후 모든 기능을 사용할 수 있습니다.",
    review_iap="인앱 결제는 샌드박스 계정으로 테스트할 수 있습니다.",
    review_webview="일부 화면은 앱 내에서 웹 콘텐츠를 표시합니다. 이는 자체 서비스의 일부이며 범용 브라우저가 아닙니다.",
    review_moderation="사용자는 부적절한 콘텐츠를 신고하고 악성 사용자를 차단할 수 있습니다. 신고는 24시간 이내에 검토됩니다.",
    review_permissions="사용 권한:",
    review_contact="심사 관련 문의: {email}",
    answer_yes="예",
    answer_no="아니요",
    answer_none="없음",
    answer_mild="드묾/약함",
    rating_guide_title="Google Play 콘텐츠 등급 가이드",
    rating_guide_intro="IARC 설문에 대한 권장 답변입니다. 제출 전에 각 항목을 확인하세요.",
    q_violence="앱에 폭력적인 내용이 있습니까?",
    q_sexuality="앱에 성적인 콘텐츠나 노출이 있습니까?",
    q_language="앱에 욕설이나 저속한 유머가 있습니까?",
    q_substances="앱에 약물, 음주 또는 흡연 관련 내용이 있습니까?",
    q_gambling="앱에 실제 또는 모의 도박이 있습니까?",
    q_interaction="사용자끼리 소통하거나 콘텐츠를 주고받을 수 있습니까?",
    q_location="앱이 사용자의 위치를 다른 사용자와 공유합니까?",
    q_purchases="앱에서 디지털 상품을 판매합니까?",
    q_ads="앱에 광고가 포함되어 있습니까?",
    q_loot_box="앱에서 무작위 아이템(확률형 아이템)을 판매합니까?",
    age_title="App Store 연령 등급 설문",
    age_intro="프로젝트 파일을 바탕으로 한 권장 답변입니다.",
    age_cartoon_violence="만화 또는 판타지 폭력",
    age_realistic_violence="사실적인 폭력",
    age_sexual_content="성적인 콘텐츠 또는 노출",
    age_profanity="욕설 또는 저속한 유머",
    age_substances="알코올, 담배 또는 약물 사용이나 언급",
    age_mature_themes="성인용/선정적 주제",
    age_horror="공포 주제",
    age_medical="의료/치료 정보",
    age_gambling="모의 도박",
    age_web_access="무제한 웹 접근",
    age_ugc="사용자 생성 콘텐츠",
    age_chat="메시지 및 채팅",
    age_loot_box="확률형 아이템",
    age_expected="예상 등급: {rating}",
    age_manual_review="'없음'으로 표시된 항목은 자동 감지되지 않은 것이므로 직접 확인하세요.",
)


class KoreanWriter(ListingWriter):
    language = Language.KO
    phrases = PHRASES
