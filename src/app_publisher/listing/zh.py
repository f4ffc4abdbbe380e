"""Simplified Chinese listing writer."""

from __future__ import annotations

from app_publisher.listing.base import ListingWriter, Phrases
from app_publisher.models import Language

PHRASES = Phrases(
    list_separator="、",
    default_keywords=("应用", "手机", "工具", "简单", "日常"),
    tagline="简单又智能",
    short_template="{name}让你的日常事务更简单、更高效。",
    promo_template="认识{name}。{tagline}，为你的日常生活而打造。",
    intro_template="欢迎使用{name}！",
    features_heading="主要功能",
    version_template="版本 {version}",
    cross_platform_note="支持 iPhone 和 Android 设备。",
    ads_notice="本应用包含广告。",
    iap_notice="部分功能需通过应用内购买使用。",
    closing="如有疑问或建议，请通过支持页面联系我们。我们会阅读每一条消息。",
    support_title="{name} 支持",
    support_intro="感谢使用{name}。如遇到问题，我们随时为你提供帮助。",
    contact_heading="联系我们",
    contact_line="邮箱：{email}",
    faq_heading="常见问题",
    faq_general_q="应用无法正常运行，该怎么办？",
    faq_general_a="请更新到最新版本并重新启动应用。如果问题仍然存在，请发送邮件并附上设备型号和系统版本。",
    faq_iap_q="如何恢复购买？",
    faq_iap_a="请使用购买时的 App Store 或 Google Play 账户登录，然后在设置页面点击“恢复购买”。",
    faq_account_q="如何删除账户？",
    faq_account_a="可在设置页面使用“删除账户”，或发送邮件至 {email}，我们会删除你的账户及数据。",
    faq_ads_q="为什么会显示广告？",
    faq_ads_a="广告收入让{name}可以免费使用。我们会尽量减少对你的打扰。",
    current_version="当前版本：{version}",
    privacy_title="{name} 隐私政策",
    effective_date="生效日期：[YYYY-MM-DD]",
    privacy_intro="本政策说明{name}处理哪些信息以及如何使用这些信息。",
    no_data_collected="{name}不收集任何个人信息。你输入的所有数据都只保存在设备上，不会发送给我们或任何第三方。",
    collected_heading="我们收集的信息",
    collect_auth="登录时提供的电子邮箱等账户信息",
    collect_analytics="用于改进应用的匿名使用统计和崩溃报告",
    collect_iap="由 App Store 或 Google Play 处理的购买记录（我们不会获取你的支付信息）",
    collect_ugc="你在应用中上传或发布的内容",
    collect_chat="你与其他用户交流的消息",
    collect_ads="用于展示广告的设备广告标识符（iOS 的 IDFA，Android 的广告 ID），可在设备设置中重置或限制。",
    third_party_notice="部分信息由第三方服务处理，这些服务有各自的隐私政策。",
    permissions_heading="设备权限",
    permissions_intro="应用仅在使用相关功能时请求以下权限：",
    children_heading="儿童隐私",
    children_notice="{name}不面向 14 岁以下儿童，也不会故意收集儿童的个人信息。",
    changes_heading="政策变更",
    changes_notice="我们可能会不时更新本政策，更新内容自发布于本页面时生效。",
    privacy_contact="如对本政策有任何疑问，请联系：{email}",
    review_title="应用审核备注",
    review_summary="{name}（版本 {version}）",
    review_demo_account="审核用演示账户：\n邮箱：[demo@example.com]\n密码：[password]",
    review_no_login="无需登录，启动后即可使用全部功能。",
    review_iap="应用内购买可使用沙盒账户进行测试。",
    review_webview="部分页面会在应用内显示网页内容，这些内容属于我们自己的服务，并非通用浏览器。",
    review_moderation="用户可以举报不当内容并屏蔽恶意用户，举报会在 24 小时内处理。",
    review_permissions="使用的权限：",
    review_contact="审核相关问题请联系：{email}",
    answer_yes="是",
    answer_no="否",
    answer_none="无",
    answer_mild="偶尔/轻微",
    rating_guide_title="Google Play 内容分级指南",
    rating_guide_intro="以下为 IARC 问卷的建议答案，提交前请逐项确认。",
    q_violence="应用是否包含暴力内容？",
    q_sexuality="应用是否包含色情内容或裸露？",
    q_language="应用是否包含粗俗语言或低俗幽默？",
    q_substances="应用是否涉及毒品、酒精或烟草？",
    q_gambling="应用是否包含真实或模拟赌博？",
    q_interaction="用户之间能否互动或交换内容？",
    q_location="应用是否会与其他用户共享用户位置？",
    q_purchases="应用是否销售数字商品？",
    q_ads="应用是否包含广告？",
    q_loot_box="应用是否销售随机物品（抽卡/盲盒）？",
    age_title="App Store 年龄分级问卷",
    age_intro="以下为根据项目文件得出的建议答案。",
    age_cartoon_violence="卡通或幻想暴力",
    age_realistic_violence="写实暴力",
    age_sexual_content="色情内容或裸露",
    age_profanity="粗俗语言或低俗幽默",
    age_substances="酒精、烟草或药物的使用或提及",
    age_mature_themes="成人/性暗示主题",
    age_horror="恐怖主题",
    age_medical="医疗/治疗信息",
    age_gambling="模拟赌博",
    age_web_access="不受限制的网页访问",
    age_ugc="用户生成内容",
    age_chat="消息与聊天",
    age_loot_box="随机物品（抽卡）",
    age_expected="预计分级：{rating}",
    age_manual_review="标记为“无”的项目未被自动检测到，请手动核实。",
)


class ChineseWriter(ListingWriter):
    language = Language.ZH
    phrases = PHRASES
