"""Static N5 content: kana, kanji, vocabulary and grammar points."""

from .config import CHARACTER_CATEGORIES, GENERAL
from .models import GrammarPoint, LearnableItem


def _kana(prefix: str, category: str, rows: list[tuple[str, str]]) -> list[LearnableItem]:
    return [
        LearnableItem(id=f"{prefix}-{i:03d}", char=char, romaji=romaji, category=category)
        for i, (char, romaji) in enumerate(rows, start=1)
    ]


_HIRAGANA_ROWS = [
    # Basics (46)
    ('あ', 'a'), ('い', 'i'), ('う', 'u'), ('え', 'e'), ('お', 'o'),
    ('か', 'ka'), ('き', 'ki'), ('く', 'ku'), ('け', 'ke'), ('こ', 'ko'),
    ('さ', 'sa'), ('し', 'shi'), ('す', 'su'), ('せ', 'se'), ('そ', 'so'),
    ('た', 'ta'), ('ち', 'chi'), ('つ', 'tsu'), ('て', 'te'), ('と', 'to'),
    ('な', 'na'), ('に', 'ni'), ('ぬ', 'nu'), ('ね', 'ne'), ('の', 'no'),
    ('は', 'ha'), ('ひ', 'hi'), ('ふ', 'fu'), ('へ', 'he'), ('ほ', 'ho'),
    ('ま', 'ma'), ('み', 'mi'), ('む', 'mu'), ('め', 'me'), ('も', 'mo'),
    ('や', 'ya'), ('ゆ', 'yu'), ('よ', 'yo'),
    ('ら', 'ra'), ('り', 'ri'), ('る', 'ru'), ('れ', 're'), ('ろ', 'ro'),
    ('わ', 'wa'), ('を', 'wo'), ('ん', 'n'),
    # Dakuten & handakuten (25)
    ('が', 'ga'), ('ぎ', 'gi'), ('ぐ', 'gu'), ('げ', 'ge'), ('ご', 'go'),
    ('ざ', 'za'), ('じ', 'ji'), ('ず', 'zu'), ('ぜ', 'ze'), ('ぞ', 'zo'),
    ('だ', 'da'), ('ぢ', 'ji (di)'), ('づ', 'zu (du)'), ('で', 'de'), ('ど', 'do'),
    ('ば', 'ba'), ('び', 'bi'), ('ぶ', 'bu'), ('べ', 'be'), ('ぼ', 'bo'),
    ('ぱ', 'pa'), ('ぴ', 'pi'), ('ぷ', 'pu'), ('ぺ', 'pe'), ('ぽ', 'po'),
]

_KATAKANA_ROWS = [
    ('ア', 'a'), ('イ', 'i'), ('ウ', 'u'), ('エ', 'e'), ('オ', 'o'),
    ('カ', 'ka'), ('キ', 'ki'), ('ク', 'ku'), ('ケ', 'ke'), ('コ', 'ko'),
    ('サ', 'sa'), ('シ', 'shi'), ('ス', 'su'), ('セ', 'se'), ('ソ', 'so'),
    ('タ', 'ta'), ('チ', 'chi'), ('ツ', 'tsu'), ('テ', 'te'), ('ト', 'to'),
    ('ナ', 'na'), ('ニ', 'ni'), ('ヌ', 'nu'), ('ネ', 'ne'), ('ノ', 'no'),
    ('ハ', 'ha'), ('ヒ', 'hi'), ('フ', 'fu'), ('ヘ', 'he'), ('ホ', 'ho'),
    ('マ', 'ma'), ('ミ', 'mi'), ('ム', 'mu'), ('メ', 'me'), ('モ', 'mo'),
    ('ヤ', 'ya'), ('ユ', 'yu'), ('ヨ', 'yo'),
    ('ラ', 'ra'), ('リ', 'ri'), ('ル', 'ru'), ('レ', 're'), ('ロ', 'ro'),
    ('ワ', 'wa'), ('ヲ', 'wo'), ('ン', 'n'),
]

# (kanji, romaji, meaning, onyomi, kunyomi)
_KANJI_ROWS = [
    ('一', 'ichi', 'one', 'イチ', 'ひと'),
    ('二', 'ni', 'two', 'ニ', 'ふた'),
    ('三', 'san', 'three', 'サン', 'み'),
    ('四', 'yon', 'four', 'シ', 'よ・よん'),
    ('五', 'go', 'five', 'ゴ', 'いつ'),
    ('六', 'roku', 'six', 'ロク', 'む'),
    ('七', 'nana', 'seven', 'シチ', 'なな'),
    ('八', 'hachi', 'eight', 'ハチ', 'や'),
    ('九', 'kyuu', 'nine', 'キュウ・ク', 'ここの'),
    ('十', 'juu', 'ten', 'ジュウ', 'とお'),
    ('百', 'hyaku', 'hundred', 'ヒャク', None),
    ('千', 'sen', 'thousand', 'セン', 'ち'),
    ('万', 'man', 'ten thousand', 'マン・バン', None),
    ('円', 'en', 'yen / circle', 'エン', 'まる'),
    ('日', 'nichi', 'day / sun', 'ニチ・ジツ', 'ひ・か'),
    ('月', 'getsu', 'month / moon', 'ゲツ・ガツ', 'つき'),
    ('火', 'ka', 'fire', 'カ', 'ひ'),
    ('水', 'sui', 'water', 'スイ', 'みず'),
    ('木', 'moku', 'tree', 'モク・ボク', 'き'),
    ('金', 'kin', 'gold / money', 'キン', 'かね'),
    ('土', 'do', 'earth / soil', 'ド・ト', 'つち'),
    ('年', 'nen', 'year', 'ネン', 'とし'),
    ('時', 'ji', 'time / hour', 'ジ', 'とき'),
    ('分', 'fun', 'minute / divide', 'ブン・フン', 'わ'),
    ('半', 'han', 'half', 'ハン', 'なか'),
    ('今', 'ima', 'now', 'コン', 'いま'),
    ('週', 'shuu', 'week', 'シュウ', None),
    ('午', 'go', 'noon', 'ゴ', None),
    ('前', 'mae', 'before / in front', 'ゼン', 'まえ'),
    ('後', 'ato', 'after / behind', 'ゴ・コウ', 'あと・うし'),
    ('上', 'ue', 'up / above', 'ジョウ', 'うえ・あ'),
    ('下', 'shita', 'down / below', 'カ・ゲ', 'した・さ'),
    ('左', 'hidari', 'left', 'サ', 'ひだり'),
    ('右', 'migi', 'right', 'ウ・ユウ', 'みぎ'),
    ('中', 'naka', 'middle / inside', 'チュウ', 'なか'),
    ('外', 'soto', 'outside', 'ガイ', 'そと'),
    ('東', 'higashi', 'east', 'トウ', 'ひがし'),
    ('西', 'nishi', 'west', 'セイ・サイ', 'にし'),
    ('南', 'minami', 'south', 'ナン', 'みなみ'),
    ('北', 'kita', 'north', 'ホク', 'きた'),
    ('人', 'hito', 'person', 'ジン・ニン', 'ひと'),
    ('男', 'otoko', 'man', 'ダン・ナン', 'おとこ'),
    ('女', 'onna', 'woman', 'ジョ', 'おんな'),
    ('子', 'ko', 'child', 'シ', 'こ'),
    ('父', 'chichi', 'father', 'フ', 'ちち'),
    ('母', 'haha', 'mother', 'ボ', 'はは'),
    ('友', 'tomo', 'friend', 'ユウ', 'とも'),
    ('名', 'na', 'name', 'メイ・ミョウ', 'な'),
    ('先', 'saki', 'ahead / previous', 'セン', 'さき'),
    ('生', 'sei', 'life / birth', 'セイ・ショウ', 'い・う・なま'),
    ('学', 'gaku', 'study / learning', 'ガク', 'まな'),
    ('校', 'kou', 'school building', 'コウ', None),
    ('会', 'kai', 'meet', 'カイ', 'あ'),
    ('社', 'sha', 'company / shrine', 'シャ', 'やしろ'),
    ('語', 'go', 'language / word', 'ゴ', 'かた'),
    ('本', 'hon', 'book / origin', 'ホン', 'もと'),
    ('書', 'sho', 'write', 'ショ', 'か'),
    ('読', 'doku', 'read', 'ドク', 'よ'),
    ('話', 'wa', 'talk / story', 'ワ', 'はな・はなし'),
    ('聞', 'bun', 'hear / ask', 'ブン・モン', 'き'),
    ('見', 'ken', 'see', 'ケン', 'み'),
    ('言', 'gen', 'say', 'ゲン・ゴン', 'い・こと'),
    ('食', 'shoku', 'eat / food', 'ショク', 'た・く'),
    ('飲', 'in', 'drink', 'イン', 'の'),
    ('行', 'kou', 'go', 'コウ・ギョウ', 'い・おこな'),
    ('来', 'rai', 'come', 'ライ', 'く・き'),
    ('出', 'shutsu', 'exit / go out', 'シュツ', 'で・だ'),
    ('入', 'nyuu', 'enter', 'ニュウ', 'はい・い'),
    ('休', 'kyuu', 'rest', 'キュウ', 'やす'),
    ('買', 'bai', 'buy', 'バイ', 'か'),
    ('立', 'ritsu', 'stand', 'リツ', 'た'),
    ('大', 'dai', 'big', 'ダイ・タイ', 'おお'),
    ('小', 'shou', 'small', 'ショウ', 'ちい・こ'),
    ('高', 'kou', 'tall / expensive', 'コウ', 'たか'),
    ('安', 'an', 'cheap / peaceful', 'アン', 'やす'),
    ('長', 'chou', 'long / leader', 'チョウ', 'なが'),
    ('新', 'shin', 'new', 'シン', 'あたら'),
    ('古', 'ko', 'old', 'コ', 'ふる'),
    ('白', 'haku', 'white', 'ハク', 'しろ'),
    ('多', 'ta', 'many', 'タ', 'おお'),
    ('少', 'shou', 'few / a little', 'ショウ', 'すく・すこ'),
    ('山', 'yama', 'mountain', 'サン', 'やま'),
    ('川', 'kawa', 'river', 'セン', 'かわ'),
    ('田', 'ta', 'rice field', 'デン', 'た'),
    ('天', 'ten', 'heaven / sky', 'テン', 'あま'),
    ('気', 'ki', 'spirit / air', 'キ・ケ', None),
    ('雨', 'ame', 'rain', 'ウ', 'あめ'),
    ('花', 'hana', 'flower', 'カ', 'はな'),
    ('空', 'sora', 'empty sky', 'クウ', 'そら・から'),
    ('電', 'den', 'electricity', 'デン', None),
    ('車', 'kuruma', 'vehicle', 'シャ', 'くるま'),
    ('駅', 'eki', 'train station', 'エキ', None),
    ('道', 'michi', 'road / way', 'ドウ', 'みち'),
    ('店', 'mise', 'shop', 'テン', 'みせ'),
    ('国', 'kuni', 'country', 'コク', 'くに'),
    ('何', 'nani', 'what', 'カ', 'なに・なん'),
    ('毎', 'mai', 'every', 'マイ', None),
    ('口', 'kuchi', 'mouth', 'コウ', 'くち'),
    ('目', 'me', 'eye', 'モク', 'め'),
    ('耳', 'mimi', 'ear', 'ジ', 'みみ'),
    ('手', 'te', 'hand', 'シュ', 'て'),
    ('足', 'ashi', 'foot / leg', 'ソク', 'あし・た'),
    ('力', 'chikara', 'power', 'リョク・リキ', 'ちから'),
]

# kanji -> (Sino-Vietnamese reading, example vocabulary)
_KANJI_REFERENCE = {
    '一': ('NHẤT', '一つ (ひとつ) one thing'),
    '二': ('NHỊ', '二つ (ふたつ) two things'),
    '三': ('TAM', '三月 (さんがつ) March'),
    '四': ('TỨ', '四時 (よじ) four o\'clock'),
    '五': ('NGŨ', '五日 (いつか) fifth day'),
    '六': ('LỤC', '六月 (ろくがつ) June'),
    '七': ('THẤT', '七つ (ななつ) seven things'),
    '八': ('BÁT', '八百屋 (やおや) greengrocer'),
    '九': ('CỬU', '九時 (くじ) nine o\'clock'),
    '十': ('THẬP', '十日 (とおか) tenth day'),
    '百': ('BÁCH', '三百 (さんびゃく) three hundred'),
    '千': ('THIÊN', '千円 (せんえん) 1000 yen'),
    '万': ('VẠN', '一万円 (いちまんえん) 10,000 yen'),
    '円': ('VIÊN', '百円 (ひゃくえん) 100 yen'),
    '日': ('NHẬT', '日本 (にほん) Japan'),
    '月': ('NGUYỆT', '月曜日 (げつようび) Monday'),
    '火': ('HỎA', '火曜日 (かようび) Tuesday'),
    '水': ('THỦY', '水曜日 (すいようび) Wednesday'),
    '木': ('MỘC', '木曜日 (もくようび) Thursday'),
    '金': ('KIM', 'お金 (おかね) money'),
    '土': ('THỔ', '土曜日 (どようび) Saturday'),
    '年': ('NIÊN', '今年 (ことし) this year'),
    '時': ('THỜI', '時間 (じかん) time'),
    '分': ('PHÂN', '五分 (ごふん) five minutes'),
    '半': ('BÁN', '半分 (はんぶん) half'),
    '今': ('KIM', '今日 (きょう) today'),
    '週': ('CHU', '毎週 (まいしゅう) every week'),
    '午': ('NGỌ', '午後 (ごご) afternoon'),
    '前': ('TIỀN', '名前 (なまえ) name'),
    '後': ('HẬU', '後ろ (うしろ) behind'),
    '上': ('THƯỢNG', '上手 (じょうず) skillful'),
    '下': ('HẠ', '地下鉄 (ちかてつ) subway'),
    '左': ('TẢ', '左手 (ひだりて) left hand'),
    '右': ('HỮU', '右側 (みぎがわ) right side'),
    '中': ('TRUNG', '中国 (ちゅうごく) China'),
    '外': ('NGOẠI', '外国 (がいこく) foreign country'),
    '東': ('ĐÔNG', '東京 (とうきょう) Tokyo'),
    '西': ('TÂY', '西口 (にしぐち) west exit'),
    '南': ('NAM', '南口 (みなみぐち) south exit'),
    '北': ('BẮC', '北海道 (ほっかいどう) Hokkaido'),
    '人': ('NHÂN', '日本人 (にほんじん) Japanese person'),
    '男': ('NAM', '男の子 (おとこのこ) boy'),
    '女': ('NỮ', '女の子 (おんなのこ) girl'),
    '子': ('TỬ', '子供 (こども) child'),
    '父': ('PHỤ', 'お父さん (おとうさん) father'),
    '母': ('MẪU', 'お母さん (おかあさん) mother'),
    '友': ('HỮU', '友達 (ともだち) friend'),
    '名': ('DANH', '名前 (なまえ) name'),
    '先': ('TIÊN', '先生 (せんせい) teacher'),
    '生': ('SINH', '学生 (がくせい) student'),
    '学': ('HỌC', '大学 (だいがく) university'),
    '校': ('HIỆU', '学校 (がっこう) school'),
    '会': ('HỘI', '会社 (かいしゃ) company'),
    '社': ('XÃ', '社長 (しゃちょう) company president'),
    '語': ('NGỮ', '日本語 (にほんご) Japanese language'),
    '本': ('BẢN', '本屋 (ほんや) bookstore'),
    '書': ('THƯ', '辞書 (じしょ) dictionary'),
    '読': ('ĐỘC', '読書 (どくしょ) reading'),
    '話': ('THOẠI', '電話 (でんわ) telephone'),
    '聞': ('VĂN', '新聞 (しんぶん) newspaper'),
    '見': ('KIẾN', '見物 (けんぶつ) sightseeing'),
    '言': ('NGÔN', '言葉 (ことば) word'),
    '食': ('THỰC', '食堂 (しょくどう) cafeteria'),
    '飲': ('ẨM', '飲み物 (のみもの) drink'),
    '行': ('HÀNH', '銀行 (ぎんこう) bank'),
    '来': ('LAI', '来週 (らいしゅう) next week'),
    '出': ('XUẤT', '出口 (でぐち) exit'),
    '入': ('NHẬP', '入口 (いりぐち) entrance'),
    '休': ('HƯU', '休み (やすみ) holiday'),
    '買': ('MÃI', '買い物 (かいもの) shopping'),
    '立': ('LẬP', '国立 (こくりつ) national'),
    '大': ('ĐẠI', '大きい (おおきい) big'),
    '小': ('TIỂU', '小さい (ちいさい) small'),
    '高': ('CAO', '高校 (こうこう) high school'),
    '安': ('AN', '安い (やすい) cheap'),
    '長': ('TRƯỜNG', '長い (ながい) long'),
    '新': ('TÂN', '新聞 (しんぶん) newspaper'),
    '古': ('CỔ', '古い (ふるい) old'),
    '白': ('BẠCH', '白い (しろい) white'),
    '多': ('ĐA', '多い (おおい) many'),
    '少': ('THIỂU', '少し (すこし) a little'),
    '山': ('SƠN', '富士山 (ふじさん) Mt. Fuji'),
    '川': ('XUYÊN', '川口 (かわぐち) river mouth'),
    '田': ('ĐIỀN', '田中 (たなか) Tanaka'),
    '天': ('THIÊN', '天気 (てんき) weather'),
    '気': ('KHÍ', '元気 (げんき) healthy'),
    '雨': ('VŨ', '大雨 (おおあめ) heavy rain'),
    '花': ('HOA', '花火 (はなび) fireworks'),
    '空': ('KHÔNG', '空港 (くうこう) airport'),
    '電': ('ĐIỆN', '電車 (でんしゃ) train'),
    '車': ('XA', '自転車 (じてんしゃ) bicycle'),
    '駅': ('DỊCH', '駅員 (えきいん) station staff'),
    '道': ('ĐẠO', '北海道 (ほっかいどう) Hokkaido'),
    '店': ('ĐIẾM', '店員 (てんいん) shop clerk'),
    '国': ('QUỐC', '外国人 (がいこくじん) foreigner'),
    '何': ('HÀ', '何時 (なんじ) what time'),
    '毎': ('MỖI', '毎日 (まいにち) every day'),
    '口': ('KHẨU', '入口 (いりぐち) entrance'),
    '目': ('MỤC', '目的 (もくてき) purpose'),
    '耳': ('NHĨ', '耳鼻科 (じびか) ENT clinic'),
    '手': ('THỦ', '切手 (きって) postage stamp'),
    '足': ('TÚC', '一足 (いっそく) one pair of shoes'),
    '力': ('LỰC', '電力 (でんりょく) electric power'),
}

# (word, romaji, meaning)
_VOCABULARY_ROWS = [
    ('学校', 'gakkou', 'school'),
    ('先生', 'sensei', 'teacher'),
    ('学生', 'gakusei', 'student'),
    ('友達', 'tomodachi', 'friend (companion)'),
    ('家族', 'kazoku', 'family'),
    ('電車', 'densha', 'train'),
    ('自転車', 'jitensha', 'bicycle'),
    ('会社', 'kaisha', 'company'),
    ('病院', 'byouin', 'hospital'),
    ('図書館', 'toshokan', 'library'),
    ('水曜日', 'suiyoubi', 'Wednesday'),
    ('天気', 'tenki', 'weather'),
    ('映画', 'eiga', 'movie'),
    ('音楽', 'ongaku', 'music'),
    ('写真', 'shashin', 'photograph'),
    ('時計', 'tokei', 'clock / watch'),
    ('新聞', 'shinbun', 'newspaper'),
    ('部屋', 'heya', 'room'),
    ('朝ご飯', 'asagohan', 'breakfast'),
    ('晩ご飯', 'bangohan', 'dinner'),
    ('お茶', 'ocha', 'green tea'),
    ('水', 'mizu', 'drinking water'),
    ('肉', 'niku', 'meat'),
    ('魚', 'sakana', 'fish'),
    ('野菜', 'yasai', 'vegetables'),
    ('果物', 'kudamono', 'fruit'),
    ('犬', 'inu', 'dog'),
    ('猫', 'neko', 'cat'),
    ('鳥', 'tori', 'bird'),
    ('海', 'umi', 'sea'),
    ('春', 'haru', 'spring'),
    ('夏', 'natsu', 'summer'),
    ('秋', 'aki', 'autumn'),
    ('冬', 'fuyu', 'winter'),
    ('今日', 'kyou', 'today'),
    ('明日', 'ashita', 'tomorrow'),
    ('昨日', 'kinou', 'yesterday'),
    ('毎日', 'mainichi', 'every day'),
    ('食べる', 'taberu', 'to eat'),
    ('飲む', 'nomu', 'to drink'),
    ('行く', 'iku', 'to go'),
    ('来る', 'kuru', 'to come'),
    ('見る', 'miru', 'to see'),
    ('聞く', 'kiku', 'to listen'),
    ('話す', 'hanasu', 'to speak'),
    ('読む', 'yomu', 'to read'),
    ('書く', 'kaku', 'to write'),
    ('買う', 'kau', 'to buy'),
    ('寝る', 'neru', 'to sleep'),
    ('起きる', 'okiru', 'to wake up'),
    ('大きい', 'ookii', 'large'),
    ('小さい', 'chiisai', 'little'),
    ('高い', 'takai', 'expensive / high'),
    ('安い', 'yasui', 'inexpensive'),
    ('新しい', 'atarashii', 'brand new'),
    ('古い', 'furui', 'aged / old (things)'),
    ('暑い', 'atsui', 'hot (weather)'),
    ('寒い', 'samui', 'cold (weather)'),
    ('好き', 'suki', 'liked'),
    ('元気', 'genki', 'healthy / energetic'),
]

_GRAMMAR_ROWS = [
    ('g-001', 'は (topic marker)', 'Noun は ...',
     'Marks the topic of the sentence: what the sentence is about.',
     'わたしはがくせいです。', 'I am a student.'),
    ('g-002', 'です', 'Noun / Adjective です',
     'Polite copula, roughly "to be". Ends polite statements.',
     'これはほんです。', 'This is a book.'),
    ('g-003', 'か (question)', 'Sentence か',
     'Added to the end of a sentence to turn it into a question.',
     'あなたはせんせいですか。', 'Are you a teacher?'),
    ('g-004', 'の (possessive)', 'Noun の Noun',
     'Links two nouns; the first one owns or describes the second.',
     'わたしのかばんです。', 'It is my bag.'),
    ('g-005', 'を (object marker)', 'Noun を Verb',
     'Marks the direct object of an action verb.',
     'みずをのみます。', 'I drink water.'),
    ('g-006', 'に (time / destination)', 'Time / Place に Verb',
     'Marks a specific point in time or the destination of movement.',
     'しちじにおきます。', 'I get up at seven.'),
    ('g-007', 'へ (direction)', 'Place へ 行きます',
     'Marks the direction of movement. Pronounced "e".',
     'がっこうへいきます。', 'I go to school.'),
    ('g-008', 'で (place of action)', 'Place で Verb',
     'Marks where an action takes place, or the means used.',
     'としょかんでべんきょうします。', 'I study at the library.'),
    ('g-009', 'も (also)', 'Noun も ...',
     'Replaces は or が to mean "also" or "too".',
     'わたしもいきます。', 'I will go too.'),
    ('g-010', 'ます form', 'Verb stem + ます',
     'Polite non-past form of a verb: habits and future actions.',
     'まいにちコーヒーをのみます。', 'I drink coffee every day.'),
    ('g-011', 'ません (negative)', 'Verb stem + ません',
     'Polite negative non-past form of a verb.',
     'にくをたべません。', 'I do not eat meat.'),
    ('g-012', 'ました (past)', 'Verb stem + ました',
     'Polite past form of a verb.',
     'きのうえいがをみました。', 'I watched a movie yesterday.'),
    ('g-013', 'たい (want to)', 'Verb stem + たい',
     'Expresses the speaker\'s desire to do something.',
     'にほんへいきたいです。', 'I want to go to Japan.'),
    ('g-014', 'てください (please do)', 'Verb て-form + ください',
     'Politely asks someone to do something.',
     'ゆっくりはなしてください。', 'Please speak slowly.'),
    ('g-015', 'がある / がいる (existence)', 'Noun が あります / います',
     'あります for inanimate things, います for people and animals.',
     'へやにねこがいます。', 'There is a cat in the room.'),
]

HIRAGANA = _kana('hira', 'hiragana', _HIRAGANA_ROWS)
KATAKANA = _kana('kata', 'katakana', _KATAKANA_ROWS)
KANJI_N5 = [
    LearnableItem(id=f"kanji-{i:03d}", char=char, romaji=romaji, category='kanji',
                  meaning=meaning, onyomi=onyomi, kunyomi=kunyomi,
                  sino_vietnamese=_KANJI_REFERENCE[char][0], example_vocab=_KANJI_REFERENCE[char][1])
    for i, (char, romaji, meaning, onyomi, kunyomi) in enumerate(_KANJI_ROWS, start=1)
]
VOCABULARY_N5 = [
    LearnableItem(id=f"vocab-{i:03d}", char=word, romaji=romaji, category='vocabulary', meaning=meaning)
    for i, (word, romaji, meaning) in enumerate(_VOCABULARY_ROWS, start=1)
]
GRAMMAR_N5 = [GrammarPoint(*row) for row in _GRAMMAR_ROWS]

# Display groupings for the progress overview
SUBSECTIONS = {
    'hiragana': [('Basics', HIRAGANA[:46]), ('Dakuten & Handakuten', HIRAGANA[46:])],
    'katakana': [('Basics', KATAKANA)],
    'kanji': [('Standard N5 Set', KANJI_N5)],
    'vocabulary': [('Core N5 Words', VOCABULARY_N5)],
}


class Catalog:
    """Read-only, ordered content lists per category."""

    def __init__(self, hiragana=None, katakana=None, kanji=None, vocabulary=None, grammar=None):
        self._items = {
            'hiragana': list(HIRAGANA if hiragana is None else hiragana),
            'katakana': list(KATAKANA if katakana is None else katakana),
            'kanji': list(KANJI_N5 if kanji is None else kanji),
            'vocabulary': list(VOCABULARY_N5 if vocabulary is None else vocabulary),
        }
        self.grammar = list(GRAMMAR_N5 if grammar is None else grammar)
        self._by_id = {item.id: item for items in self._items.values() for item in items}

    def items(self, category: str) -> list[LearnableItem]:
        """Return the full curriculum for a character category, in order."""
        if category not in self._items:
            raise ValueError(f"Unknown category: {category}")
        return list(self._items[category])

    def all_items(self) -> list[LearnableItem]:
        result = []
        for category in CHARACTER_CATEGORIES:
            result.extend(self._items[category])
        return result

    def get(self, item_id: str) -> LearnableItem | None:
        return self._by_id.get(item_id)

    def find_by_char(self, char: str) -> LearnableItem | None:
        """Find the first item displaying this character (kanji and vocabulary first)."""
        for category in ('kanji', 'vocabulary', 'hiragana', 'katakana'):
            for item in self._items[category]:
                if item.char == char:
                    return item
        return None

    def search_vocabulary(self, query: str = '') -> list[LearnableItem]:
        """Vocabulary whose word contains query, or whose meaning/romaji contains it case-insensitively."""
        needle = query.lower()
        return [
            item for item in self._items['vocabulary']
            if query in item.char
            or needle in (item.meaning or '').lower()
            or needle in item.romaji.lower()
        ]

    def search_grammar(self, query: str = '') -> list[GrammarPoint]:
        needle = query.lower()
        return [
            point for point in self.grammar
            if needle in point.title.lower() or needle in point.explanation.lower()
        ]

    def is_quiz_target(self, target: str) -> bool:
        return target == GENERAL or target in self._items


DEFAULT_CATALOG = Catalog()
