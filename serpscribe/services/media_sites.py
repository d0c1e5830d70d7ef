"""Catalogue of publisher media sites the writing pipeline targets."""

import json
from dataclasses import asdict, dataclass


@dataclass(frozen=True, slots=True)
class MediaSite:
    """A publisher site and the locale its SERPs are fetched in."""

    name: str
    url: str
    title: str
    description: str
    language: str
    region: str


MEDIA_SITES: tuple[MediaSite, ...] = (
    MediaSite(
        name="BF",
        url="https://businessfocus.io/",
        title="BusinessFocus | 聚焦商業投資世界",
        description=(
            "一本發展迅速的線上商業和金融雜誌，為管理人員、科技愛好者和企業家提供嶄新的商業、"
            "投資、科技資訊和創業靈感"
        ),
        language="zh-TW",
        region="hk",
    ),
    MediaSite(
        name="GSMY",
        url="https://girlstyle.com/my/",
        title="GirlStyle 马来西亚女生日常 | 大马女孩专属的最Young情报站",
        description=(
            "為女生集合全球各地的流行趋势，與妳分享女生們的生活、美容、时尚、恋爱日常等，"
            "用優質的内容走入你的心，讓你成為引领潮流的时髦Girl~"
        ),
        language="zh-CN",
        region="my",
    ),
    MediaSite(
        name="GSTW",
        url="https://girlstyle.com/tw/",
        title="台灣女生日常 | 分享女孩間的生活樂趣",
        description=(
            "女孩們最愛的美妝保養、時尚穿搭、娛樂名人、生活資訊，所有人氣熱話都盡在 "
            "GirlStyle 台灣女生日常"
        ),
        language="zh-TW",
        region="tw",
    ),
    MediaSite(
        name="GSSG",
        url="https://girlstyle.com/sg/",
        title="GirlStyle Singapore | No.1 SG Female Lifestyle Magazine",
        description=(
            "Being the most engaging female online magazine in Singapore, we share the BEST "
            "deals in town, latest beauty trend, new product launches, travel tips, fitness "
            "tips, food & all other hot topics!"
        ),
        language="en",
        region="sg",
    ),
    MediaSite(
        name="GSHK",
        url="https://pretty.presslogic.com/",
        title="GirlStyle 女生日常 | 最受女性歡迎的網上雜誌",
        description=(
            "分享美妝護膚、時尚穿搭、髮型美甲、網購等最新潮流情報、貼士與教學。探討各種網絡熱話、"
            "娛樂新聞、電影劇集，星座運程、愛情疑難。女生們愛看的資訊盡在GirlStyle 女生日常。"
        ),
        language="zh-TW",
        region="hk",
    ),
    MediaSite(
        name="HS",
        url="https://holidaysmart.io/",
        title="HolidaySmart 假期日常 | 香港最強食買玩旅遊資訊精明消費雜誌",
        description=(
            "「HolidaySmart 假期日常」為讀者蒐羅高質素的本地及旅遊美食、必買、好去處資訊之外，"
            "亦會分享每日優惠情報、報告各類限時折扣優惠等，令大家一齊成為至 Smart 精明消費者。"
        ),
        language="zh-TW",
        region="hk",
    ),
    MediaSite(
        name="HSHK",
        url="https://holidaysmart.io/hk/",
        title="HolidaySmart 假期日常 | 香港最強食買玩旅遊資訊精明消費雜誌",
        description=(
            "「HolidaySmart 假期日常」為讀者蒐羅高質素的本地及旅遊美食、必買、好去處資訊之外，"
            "亦會分享每日優惠情報、報告各類限時折扣優惠等，令大家一齊成為至 Smart 精明消費者。"
        ),
        language="zh-TW",
        region="hk",
    ),
    MediaSite(
        name="HSTW",
        url="https://holidaysmart.io/tw/",
        title="HolidaySmart 台灣假期日常 | 台灣最強食買玩旅遊資訊精明消費雜誌",
        description=(
            "所有台灣消費者要知道的「去哪玩」、「搜好價」資訊！台灣本地及旅遊美食、生活購物、"
            "週末活動、優惠折扣等資料，盡在HolidaySmart 台灣假期日常。"
        ),
        language="zh-TW",
        region="tw",
    ),
    MediaSite(
        name="MD",
        url="https://mamidaily.com/",
        title="MamiDaily 親子日常 | 媽媽專屬的育兒心得交流平台",
        description="一個專門為母親或準媽媽分享和獲得有關懷孕、育兒、升學和嬰兒服裝等資訊的平台。",
        language="zh-TW",
        region="hk",
    ),
    MediaSite(
        name="PL",
        url="https://poplady-mag.com/",
        title="PopLady | 時尚資訊生活品味平台",
        description=(
            "PopLady 是一本以女性為主打的線上雜誌，搜羅世界各地最新最多最潮品牌、服裝穿搭、"
            "美容彩妝、時尚生活資訊，讓妳時刻輕易掌握潮流。"
        ),
        language="zh-TW",
        region="tw",
    ),
    MediaSite(
        name="KD",
        url="https://thekdaily.com/",
        title="Kdaily 韓粉日常 | 最強韓星、韓劇資訊及韓流娛樂討論網上雜誌",
        description=(
            "韓星、韓劇、KPOP、綜藝、美食、旅遊等韓國娛樂資訊一把抓！持續追蹤韓流熱門話題，"
            "帶你看看最近韓妞都在夯什麼"
        ),
        language="zh-TW",
        region="tw",
    ),
    MediaSite(
        name="TB",
        url="https://topbeautyhk.com/",
        title="TopBeauty | 學習成為更美好更自信的自己",
        description=(
            "將一切美妝護膚、健康修身、時尚購物、生活藝術、愛情及職場發展等相關資訊帶給"
            "所有愛自己和重視身心健康的女生。"
        ),
        language="zh-TW",
        region="hk",
    ),
    MediaSite(
        name="UL",
        url="https://urbanlifehk.com/",
        title="UrbanLife Health 健康新態度 | 新一代都市人都關心的 · 健康生活新態度",
        description=(
            "提供最新最深入的醫療健康資訊，搜羅專科醫生專業意見，帶大家認識癌症、深入了解皮膚濕疹、"
            "鼻敏感、胃痛、心口痛等常見病。介紹食物營養、湯水食譜，盡在 UrbanLife Health 健康新態度。"
        ),
        language="zh-TW",
        region="hk",
    ),
    MediaSite(
        name="PC",
        url="https://thepetcity.co",
        title="PetCity 毛孩日常 | 飼養寵物、寵物用品、萌寵趣聞",
        description=(
            "專屬毛孩愛好者的資訊平台，不論你是貓奴、狗奴，還是其他動物控，一起發掘最新的萌寵趣聞、"
            "有趣的寵物飼養知識、訓練動物、寵物用品推薦、豐富多樣的寵物可愛影片。"
        ),
        language="zh-TW",
        region="tw",
    ),
)

_SITES_BY_NAME = {site.name: site for site in MEDIA_SITES}


def find_media_site(name: str | None) -> MediaSite | None:
    if not name:
        return None
    return _SITES_BY_NAME.get(name.strip())


def describe_media_site(name: str | None) -> str:
    """JSON description of a site for prompts.

    Unknown names still describe themselves so generation can proceed.
    """
    site = find_media_site(name)
    if site is None:
        return json.dumps({"name": name or "unspecified"}, ensure_ascii=False)
    return json.dumps(asdict(site), ensure_ascii=False, indent=2)
