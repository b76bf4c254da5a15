"""Default records written once into an empty collection."""
from __future__ import annotations

from catalog.domain.models import Author, BlogPost, CourseDetail, SyllabusWeek, default_syllabus

_UNSPLASH = "https://images.unsplash.com/{photo}?ixlib=rb-4.0.3&auto=format&fit=crop&w={width}&q=80"
_SEED_CREATED_AT = "2024-01-01T00:00:00Z"


def _photo(photo: str, width: int = 2070) -> str:
    return _UNSPLASH.format(photo=photo, width=width)


def default_courses() -> list[CourseDetail]:
    return [
        CourseDetail(
            id="jlpt-n5",
            name="Tiếng Nhật N5 Cơ Bản",
            level="N5",
            description=(
                "Khóa học tiếng Nhật cơ bản cho người mới bắt đầu, học alphabet Hiragana, "
                "Katakana và 600 từ vựng cơ bản."
            ),
            duration="3 tháng",
            price=1500000,
            image=_photo("photo-1528360983277-13d401cdc186"),
            features=["Học Hiragana & Katakana", "600 từ vựng N5", "Ngữ pháp cơ bản", "Luyện nghe nói"],
            is_active=True,
            created_at=_SEED_CREATED_AT,
            syllabus=[
                SyllabusWeek(1, "Hiragana & Chào hỏi", ["Học bảng chữ cái Hiragana", "Cách chào hỏi cơ bản", "Tự giới thiệu"]),
                SyllabusWeek(2, "Katakana & Số đếm", ["Học bảng chữ cái Katakana", "Số đếm từ 1-100", "Ngày tháng năm"]),
                SyllabusWeek(3, "Từ vựng sinh hoạt", ["Từ vựng gia đình", "Đồ vật trong nhà", "Hoạt động hàng ngày"]),
                SyllabusWeek(4, "Ngữ pháp cơ bản", ["Trợ từ は, が, を", "Động từ nhóm 1,2,3", "Thời hiện tại, quá khứ"]),
            ],
            requirements=["Có đam mê học tiếng Nhật", "Cam kết học tập nghiêm túc", "Tham gia đầy đủ các buổi học"],
            outcomes=["Nắm vững kiến thức N5", "Có thể giao tiếp cơ bản", "Sẵn sàng cho cấp độ N4"],
        ),
        CourseDetail(
            id="jlpt-n4",
            name="Tiếng Nhật N4 Trung Cấp",
            level="N4",
            description="Khóa học tiếng Nhật trung cấp với 1500 từ vựng và ngữ pháp phức tạp hơn.",
            duration="4 tháng",
            price=2000000,
            image=_photo("photo-1545569341-9eb8b30979d9"),
            features=["1500 từ vựng N4", "Ngữ pháp trung cấp", "Kanji cơ bản", "Luyện thi N4"],
            is_active=True,
            created_at=_SEED_CREATED_AT,
            syllabus=[
                SyllabusWeek(1, "Ôn tập N5", ["Ôn tập Hiragana, Katakana", "Từ vựng N5", "Ngữ pháp cơ bản"]),
                SyllabusWeek(2, "Kanji cơ bản", ["50 chữ Kanji đầu tiên", "Cách đọc On, Kun", "Từ ghép Kanji"]),
                SyllabusWeek(3, "Ngữ pháp N4", ["Thể て của động từ", "Thể potential", "Thể passive"]),
                SyllabusWeek(4, "Hội thoại nâng cao", ["Giao tiếp công việc", "Mua sắm", "Đi du lịch"]),
            ],
            requirements=["Đã hoàn thành N5 hoặc có kiến thức tương đương", "Cam kết học tập nghiêm túc"],
            outcomes=["Nắm vững kiến thức N4", "Giao tiếp tự tin hơn", "Sẵn sàng cho cấp độ N3"],
        ),
        CourseDetail(
            id="jlpt-n3",
            name="Tiếng Nhật N3 Nâng Cao",
            level="N3",
            description="Khóa học tiếng Nhật nâng cao với 3000 từ vựng và 600 chữ Kanji.",
            duration="6 tháng",
            price=2500000,
            image=_photo("photo-1493976040374-85c8e12f0c0e"),
            features=["3000 từ vựng N3", "600 chữ Kanji", "Ngữ pháp nâng cao", "Luyện thi N3"],
            is_active=True,
            created_at=_SEED_CREATED_AT,
            syllabus=default_syllabus(),
            requirements=["Đã hoàn thành N4 hoặc có kiến thức tương đương", "Cam kết học tập nghiêm túc"],
            outcomes=["Nắm vững kiến thức N3", "Giao tiếp thành thạo", "Có thể làm việc bằng tiếng Nhật"],
        ),
        CourseDetail(
            id="business-japanese",
            name="Tiếng Nhật Thương Mại",
            level="Business",
            description="Khóa học tiếng Nhật chuyên ngành cho môi trường công việc và kinh doanh.",
            duration="3 tháng",
            price=3000000,
            image=_photo("photo-1542744173-8e7e53415bb0"),
            features=["Tiếng Nhật công sở", "Email & báo cáo", "Thuyết trình", "Giao tiếp khách hàng"],
            is_active=True,
            created_at=_SEED_CREATED_AT,
            syllabus=default_syllabus(),
            requirements=["Có trình độ N3 trở lên", "Muốn làm việc tại Nhật Bản"],
            outcomes=["Giao tiếp thành thạo trong môi trường công việc", "Viết email và báo cáo chuyên nghiệp"],
        ),
        CourseDetail(
            id="anime-translation",
            name="Biên Dịch Anime & Manga",
            level="Professional",
            description="Khóa đào tạo nghiệp vụ biên dịch anime, manga và light novel.",
            duration="2 tháng",
            price=2200000,
            image=_photo("photo-1578662996442-48f60103fc96"),
            features=["Kỹ thuật biên dịch", "Phần mềm chuyên dụng", "Thực hành dự án", "Chứng chỉ hoàn thành"],
            is_active=True,
            created_at=_SEED_CREATED_AT,
            syllabus=default_syllabus(),
            requirements=["Có trình độ N2 trở lên", "Yêu thích anime/manga"],
            outcomes=["Có thể biên dịch anime/manga chuyên nghiệp", "Nắm vững các công cụ biên dịch"],
        ),
        CourseDetail(
            id="teaching-methodology",
            name="Nghiệp Vụ Dạy Tiếng Nhật",
            level="Professional",
            description="Khóa đào tạo phương pháp giảng dạy tiếng Nhật hiệu quả.",
            duration="3 tháng",
            price=2800000,
            image=_photo("photo-1552664730-d307ca884978"),
            features=["Phương pháp giảng dạy", "Quản lý lớp học", "Thiết kế bài học", "Đánh giá học viên"],
            is_active=True,
            created_at=_SEED_CREATED_AT,
            syllabus=default_syllabus(),
            requirements=["Có trình độ N2 trở lên", "Muốn trở thành giáo viên tiếng Nhật"],
            outcomes=["Nắm vững phương pháp giảng dạy", "Có thể quản lý lớp học hiệu quả"],
        ),
    ]


_KANJI_TIPS = """<h2>Giới thiệu</h2>
<p>Kanji là một trong những thử thách lớn nhất khi học tiếng Nhật. Với hơn 2000 chữ Kanji cần thiết để đọc hiểu tiếng Nhật thông thường, nhiều người cảm thấy choáng ngợp. Nhưng đừng lo, với 5 mẹo sau đây, bạn sẽ học Kanji hiệu quả hơn rất nhiều!</p>

<h3>1. Sử dụng Phương Pháp Mnemonics</h3>
<p>Mnemonics là kỹ thuật liên kết chữ Kanji với câu chuyện hoặc hình ảnh. Ví dụ, chữ 森 (rừng) được tạo bởi 3 chữ 木 (cây) - nhiều cây tạo thành rừng!</p>

<h3>2. Viết Tay Thay Vì Gõ Máy</h3>
<p>Nghiên cứu chứng minh rằng việc viết tay giúp bộ nhớ ghi nhớ tốt hơn 50% so với gõ máy. Hãy dành 10-15 phút mỗi ngày để luyện viết.</p>

<h3>3. Học Theo Bộ Thủ (Radicals)</h3>
<p>214 bộ thủ cơ bản là nền tảng của hàng ngàn chữ Kanji. Nắm vững bộ thủ sẽ giúp bạn đoán nghĩa và cách đọc của chữ mới.</p>

<h3>4. Flashcards Với Spaced Repetition</h3>
<p>Sử dụng các ứng dụng như Anki để ôn tập định kỳ. Phương pháp SRS giúp bạn nhớ lâu hơn với ít thời gian hơn.</p>

<h3>5. Đọc Truyện Tranh Manga</h3>
<p>Manga là cách học vui và hiệu quả. Bắt đầu với manga dành cho trẻ em rồi dần nâng cao độ khó.</p>

<h2>Kết Luận</h2>
<p>Học Kanji cần kiên trì và phương pháp đúng đắn. Đừng vội vàng, hãy học đều đặn mỗi ngày và bạn sẽ thấy tiến bộ rõ rệt!</p>"""

_N5_ROADMAP = """<h2>Giới Thiệu</h2>
<p>JLPT N5 là cấp độ cơ bản nhất của kỳ thi năng lực tiếng Nhật. Với lộ trình học đúng đắn, bạn hoàn toàn có thể đạt được trong 3 tháng!</p>

<h3>Tháng 1: Nền Tảng</h3>
<ul>
<li><strong>Tuần 1-2:</strong> Học Hiragana và Katakana hoàn toàn thuộc</li>
<li><strong>Tuần 3-4:</strong> 100 từ vựng N5 đầu tiên + Ngữ pháp cơ bản (です/ます)</li>
</ul>

<h3>Tháng 2: Phát Triển</h3>
<ul>
<li><strong>Tuần 5-6:</strong> 200 từ vựng tiếp theo + Ngữ pháp trợ từ (は、が、を)</li>
<li><strong>Tuần 7-8:</strong> Kanji cơ bản (50 chữ đầu tiên) + Luyện nghe</li>
</ul>

<h3>Tháng 3: Hoàn Thiện</h3>
<ul>
<li><strong>Tuần 9-10:</strong> Hoàn thành 800 từ vựng N5 + 80 chữ Kanji</li>
<li><strong>Tuần 11-12:</strong> Luyện đề thi + Ôn tập tổng hợp</li>
</ul>

<h2>Tài Liệu Cần Thiết</h2>
<ul>
<li>Sách Minna no Nihongo 1</li>
<li>Đề thi mẫu JLPT N5</li>
<li>App Anki để ôn từ vựng</li>
</ul>"""

_WORK_CULTURE = """<h2>Giới Thiệu</h2>
<p>Văn hóa làm việc tại Nhật Bản có nhiều điểm khác biệt so với Việt Nam. Việc hiểu và thích nghi với văn hóa này là chìa khóa để thành công.</p>

<h3>1. Đúng Giờ Là Vàng</h3>
<p>Người Nhật rất coi trọng thời gian. Đến muộn dù chỉ 1 phút cũng được coi là thiếu tôn trọng.</p>

<h3>2. Báo Cáo - Liên Lạc - Tư Vấn (報連相)</h3>
<p>Horenso (ほうれんそう) là nguyên tắc vàng: luôn báo cáo tiến độ, liên lạc kịp thời và tham vấn cấp trên.</p>

<h3>3. Làm Việc Nhóm</h3>
<p>Tinh thần đồng đội được đề cao. Quyết định thường được đưa ra theo sự đồng thuận chứ không phải cá nhân.</p>

<h3>4. Chào Hỏi Đúng Cách</h3>
<p>お疲れ様です (Otsukaresama desu) là câu chào chuẩn trong công sở. Cúi chào là dấu hiệu tôn trọng.</p>"""

_NQT = Author(name="Nguyễn Quang Triệu", avatar="https://ui-avatars.com/api/?name=NQT&background=1b2460&color=fff")
_LDT = Author(name="Lê Đình Tân", avatar="https://ui-avatars.com/api/?name=LDT&background=d1d7fe&color=1b2460")


def default_posts() -> list[BlogPost]:
    return [
        BlogPost(
            id="blog-1",
            title="5 Mẹo Học Kanji Hiệu Quả Cho Người Mới Bắt Đầu",
            slug="5-meo-hoc-kanji-hieu-qua",
            excerpt=(
                "Học Kanji không còn là nỗi ác mộng với 5 phương pháp đã được kiểm chứng này. "
                "Khám phá cách học thông minh để nhớ lâu hơn."
            ),
            content=_KANJI_TIPS,
            image=_photo("photo-1513258496099-48168024aec0", 800),
            category="Học tiếng Nhật",
            tags=["Kanji", "Học tiếng Nhật", "Mẹo học tập"],
            author=Author(name=_NQT.name, avatar=_NQT.avatar),
            published_at="2025-01-15T10:00:00Z",
            updated_at="2025-01-15T10:00:00Z",
            is_published=True,
            views=245,
        ),
        BlogPost(
            id="blog-2",
            title="Lộ Trình Học JLPT N5 Trong 3 Tháng",
            slug="lo-trinh-hoc-jlpt-n5-trong-3-thang",
            excerpt=(
                "Bạn muốn đạt N5 trong thời gian ngắn? Đây là lộ trình học chi tiết từng tuần "
                "giúp bạn chinh phục JLPT N5 chỉ sau 3 tháng."
            ),
            content=_N5_ROADMAP,
            image=_photo("photo-1503676260728-1c00da094a0b", 800),
            category="JLPT",
            tags=["JLPT", "N5", "Lộ trình học"],
            author=Author(name=_LDT.name, avatar=_LDT.avatar),
            published_at="2025-01-20T14:30:00Z",
            updated_at="2025-01-20T14:30:00Z",
            is_published=True,
            views=189,
        ),
        BlogPost(
            id="blog-3",
            title="Văn Hóa Làm Việc Tại Nhật Bản: Những Điều Cần Biết",
            slug="van-hoa-lam-viec-tai-nhat-ban",
            excerpt=(
                "Hiểu rõ văn hóa làm việc Nhật Bản sẽ giúp bạn thành công hơn khi làm việc "
                "với người Nhật hoặc tại Nhật Bản."
            ),
            content=_WORK_CULTURE,
            image=_photo("photo-1542744173-8e7e53415bb0", 800),
            category="Văn hóa",
            tags=["Văn hóa Nhật", "Làm việc", "Business"],
            author=Author(name=_NQT.name, avatar=_NQT.avatar),
            published_at="2025-01-25T09:00:00Z",
            updated_at="2025-01-25T09:00:00Z",
            is_published=True,
            views=156,
        ),
    ]
