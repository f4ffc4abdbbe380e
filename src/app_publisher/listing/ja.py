"""Japanese listing writer."""

from __future__ import annotations

from app_publisher.listing.base import ListingWriter, Phrases
from app_publisher.models import Language

PHRASES = Phrases(
    list_separator="、",
    default_keywords=("アプリ", "モバイル", "便利", "シンプル", "毎日"),
    tagline="シンプルでスマート",
    short_template="{name}で毎日のことをもっと簡単に、もっと速く。",
    promo_template="{name}が登場。{tagline}、毎日の暮らしのためのアプリです。",
    intro_template="{name}へようこそ！",
    features_heading="主な機能",
    version_template="バージョン {version}",
    cross_platform_note="iPhoneとAndroidの両方でご利用いただけます。",
    ads_notice="このアプリには広告が含まれます。",
    iap_notice="一部の機能はアプリ内課金でご利用いただけます。",
    closing="ご質問やご意見はサポートページからお寄せください。すべてのメッセージに目を通しています。",
    support_title="{name} サポート",
    support_intro="{name}をご利用いただきありがとうございます。お困りの際はお気軽にご連絡ください。",
    contact_heading="お問い合わせ",
    contact_line="メール: {email}",
    faq_heading="よくある質問",
    faq_general_q="アプリが正しく動作しません。どうすればよいですか？",
    faq_general_a=(
        "最新バージョンに更新してからアプリを再起動してください。解決しない場合は、"
        "端末のモデルとOSのバージョンを添えてメールでご連絡ください。"
    ),
    faq_iap_q="購入を復元するには？",
    faq_iap_a="購入時と同じApp StoreまたはGoogle Playアカウントでサインインした状態で、設定画面の「購入を復元」をタップしてください。",
    faq_account_q="アカウントを削除するには？",
    faq_account_a="設定画面の「アカウント削除」から行うか、{email}までご連絡いただければアカウントとデータを削除します。",
    faq_ads_q="広告が表示されるのはなぜですか？",
    faq_ads_a="広告収入により{name}を無料で提供しています。邪魔にならないよう配慮しています。",
    current_version="現在のバージョン: {version}",
    privacy_title="{name} プライバシーポリシー",
    effective_date="施行日: [YYYY-MM-DD]",
    privacy_intro="本ポリシーは、{name}が取り扱う情報とその利用方法について説明します。",
    no_data_collected=(
        "{name}は個人情報を収集しません。入力したデータはすべて端末内に保存され、"
        "開発者や第三者に送信されることはありません。"
    ),
    collected_heading="収集する情報",
    collect_auth="サインイン時のメールアドレスなどのアカウント情報",
    collect_analytics="アプリ改善のための匿名の利用統計とクラッシュレポート",
    collect_iap="App StoreまたはGoogle Playで処理される購入記録（決済情報は受け取りません）",
    collect_ugc="アプリに投稿またはアップロードしたコンテンツ",
    collect_chat="他のユーザーとやり取りしたメッセージ",
    collect_ads=(
        "広告表示のための端末の広告識別子（iOSのIDFA、Androidの広告ID）。"
        "端末の設定からリセットまたは制限できます。"
    ),
    third_party_notice="一部の情報は、独自のプライバシーポリシーを持つ第三者サービスによって処理されます。",
    permissions_heading="端末の権限",
    permissions_intro="アプリは関連する機能を使うときにのみ、次の権限を求めます:",
    children_heading="子どものプライバシー",
    children_notice="{name}は13歳未満の子どもを対象としておらず、子どもの個人情報を意図的に収集することはありません。",
    changes_heading="本ポリシーの変更",
    changes_notice="本ポリシーは変更されることがあります。変更はこのページに掲載した時点で有効になります。",
    privacy_contact="本ポリシーに関するお問い合わせ: {email}",
    review_title="App Review 用メモ",
    review_summary="{name}（バージョン {version}）",
    review_demo_account="審査用デモアカウント:\nメール: [demo@example.com]\nパスワード: [password]",
    review_no_login="ログインは不要です。起動直後からすべての機能を利用できます。",
    review_iap="アプリ内課金はサンドボックスアカウントでテストできます。",
    review_webview="一部の画面ではアプリ内でWebコンテンツを表示します。これは自社サービスの一部であり、汎用ブラウザではありません。",
    review_moderation="ユーザーは不適切なコンテンツを報告し、迷惑なユーザーをブロックできます。報告は24時間以内に確認します。",
    review_permissions="使用する権限:",
    review_contact="審査に関するお問い合わせ: {email}",
    answer_yes="はい",
    answer_no="いいえ",
    answer_none="なし",
    answer_mild="まれ/軽度",
    rating_guide_title="Google Play コンテンツレーティングガイド",
    rating_guide_intro="IARCアンケートの推奨回答です。提出前に各項目を確認してください。",
    q_violence="アプリに暴力的な内容は含まれますか？",
    q_sexuality="アプリに性的なコンテンツやヌードは含まれますか？",
    q_language="アプリに下品な言葉や下ネタは含まれますか？",
    q_substances="アプリに薬物、アルコール、たばこへの言及は含まれますか？",
    q_gambling="アプリに実際の、または模擬的なギャンブルは含まれますか？",
    q_interaction="ユーザー同士が交流したりコンテンツを共有したりできますか？",
    q_location="アプリはユーザーの位置情報を他のユーザーと共有しますか？",
    q_purchases="アプリでデジタル商品を販売しますか？",
    q_ads="アプリに広告は含まれますか？",
    q_loot_box="アプリでランダムアイテム（ガチャ）を販売しますか？",
    age_title="App Store 年齢制限指定アンケート",
    age_intro="プロジェクトファイルに基づく推奨回答です。",
    age_cartoon_violence="アニメまたはファンタジーでの暴力",
    age_realistic_violence="リアルな暴力",
    age_sexual_content="性的なコンテンツまたはヌード",
    age_profanity="下品な言葉または下ネタ",
    age_substances="アルコール、たばこ、薬物の使用または言及",
    age_mature_themes="成人向け/性的なテーマ",
    age_horror="ホラー/恐怖のテーマ",
    age_medical="医療/治療に関する情報",
    age_gambling="疑似ギャンブル",
    age_web_access="無制限のWebアクセス",
    age_ugc="ユーザー生成コンテンツ",
    age_chat="メッセージとチャット",
    age_loot_box="ガチャ（ランダム型アイテム）",
    age_expected="予想される年齢制限: {rating}",
    age_manual_review="「なし」の項目は自動検出されていないため、手動で確認してください。",
)


class JapaneseWriter(ListingWriter):
    language = Language.JA
    phrases = PHRASES
