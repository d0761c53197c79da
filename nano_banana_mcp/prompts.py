"""
Prompt templates exposed as MCP prompts.

Each template renders a single user message telling the agent which tool
to call and with which parameters. Missing or empty arguments fall back to
per-template defaults.
"""

from dataclasses import dataclass, field
from typing import Callable

PromptArgs = dict[str, str]


@dataclass(frozen=True)
class PromptArgumentSpec:
    """Metadata for a single prompt argument."""

    name: str
    description: str
    required: bool = False


@dataclass(frozen=True)
class PromptTemplate:
    """A named, parameterized prompt."""

    name: str
    title: str
    description: str
    arguments: tuple[PromptArgumentSpec, ...]
    build: Callable[[PromptArgs], str] = field(repr=False)

    def render(self, args: PromptArgs | None = None) -> str:
        return self.build(args or {})


def _arg(args: PromptArgs, name: str, default: str) -> str:
    return args.get(name) or default


def _tool_call(tool: str, prompt: str, **params: str) -> str:
    lines = [f"Please use the {tool} tool with these parameters:", f'- prompt: "{prompt}"']
    lines.extend(f"- {key}: {value}" for key, value in params.items())
    return "\n".join(lines)


_HIGH_THINKING = '{"thinking_level": "HIGH"}'


def _ultra_wide_panorama(args: PromptArgs) -> str:
    city = _arg(args, "city", "Shanghai")
    style = _arg(args, "style", "photorealistic aerial photography")
    time_of_day = _arg(args, "time_of_day", "golden hour")
    resolution = _arg(args, "resolution", "2K")
    return _tool_call(
        "generate_image",
        f"An ultra-wide panoramic view of {city}'s iconic landmarks and skyline during "
        f"{time_of_day}, rendered in {style} style. Seamless composition from left to right, "
        "rich in architectural details, with natural depth and atmospheric perspective.",
        aspect_ratio='"8:1"',
        image_size=f'"{resolution}"',
    )


def _weather_infographic(args: PromptArgs) -> str:
    city = _arg(args, "city", "Beijing")
    language = _arg(args, "language", "Chinese")
    days = _arg(args, "days", "5-day")
    return _tool_call(
        "generate_image",
        f"Design a modern, visually appealing {days} weather forecast infographic for {city}. "
        "Include temperature highs/lows, weather icons, humidity, wind speed, and daily clothing "
        f"recommendations. Use a clean card-based layout with soft gradients. All text in {language}.",
        aspect_ratio='"9:16"',
        image_size='"2K"',
        use_google_search="true",
    )


def _ecommerce_banner(args: PromptArgs) -> str:
    product = _arg(args, "product", "wireless headphones")
    promotion = _arg(args, "promotion", "New Arrival")
    color = _arg(args, "color_theme", "modern gradient")
    resolution = _arg(args, "resolution", "2K")
    return _tool_call(
        "generate_image",
        f"Professional e-commerce banner for {product}. Promotion text '{promotion}' prominently "
        f"displayed with elegant typography. {color} color scheme, high-end product photography "
        "style, clean composition with the product as the focal point, surrounded by subtle "
        "decorative elements.",
        aspect_ratio='"4:1"',
        image_size=f'"{resolution}"',
    )


def _product_detail_long(args: PromptArgs) -> str:
    product = _arg(args, "product", "smart watch")
    sections = _arg(args, "sections", "4")
    style = _arg(args, "style", "Apple minimalist")
    return _tool_call(
        "generate_image",
        f"A vertical product detail page for {product}, divided into {sections} visual sections "
        f"flowing from top to bottom. {style} design language. Section 1: Hero shot with product "
        "name. Remaining sections: key features with icons and brief text labels. Consistent "
        "color palette and typography throughout. Clean white background with subtle shadows.",
        aspect_ratio='"1:4"',
        image_size='"2K"',
        thinking_config=_HIGH_THINKING,
    )


_SCROLL_STYLES = {
    "traditional": (
        "traditional Chinese ink wash and color painting style, inspired by "
        "Along the River During the Qingming Festival"
    ),
    "ink-wash": "monochrome Chinese ink wash style with dynamic brush strokes",
    "ghibli": "Studio Ghibli animation style with warm colors and whimsical details",
    "pixel-art": "detailed pixel art style with retro charm",
}


def _scroll_painting_panorama(args: PromptArgs) -> str:
    city = _arg(args, "city", "Hangzhou")
    variant = _arg(args, "variant", "traditional")
    resolution = _arg(args, "resolution", "2K")
    style = _SCROLL_STYLES.get(variant, _SCROLL_STYLES["traditional"])
    return _tool_call(
        "generate_image",
        f"An ultra-wide panoramic depiction of modern {city} and its famous landmarks, rendered "
        f"in {style}. Show bustling street life, local architecture, signature food stalls, "
        "cultural landmarks, and natural scenery seamlessly flowing from one scene to the next. "
        "Rich in detail, with tiny characters going about their daily lives.",
        aspect_ratio='"8:1"',
        image_size=f'"{resolution}"',
        thinking_config=_HIGH_THINKING,
    )


def _resize_and_enhance(args: PromptArgs) -> str:
    ratio = _arg(args, "target_ratio", "16:9")
    resolution = _arg(args, "target_resolution", "2K")
    language = args.get("language")
    extra = args.get("additional_instructions")
    lang_note = f", translate all visible text to {language}" if language else ""
    extra_note = f". Also: {extra}" if extra else ""
    return (
        "Please use the edit_image tool (the user should provide a reference image). "
        "Apply these parameters:\n"
        f'- prompt: "Resize this image to {ratio} aspect ratio. Maintain the original '
        "composition, visual style, all UI elements, and content structure. Extend or crop "
        f"intelligently to fill the new canvas without distortion{lang_note}{extra_note}. "
        f'Output in {resolution} resolution."\n\n'
        "The user needs to provide their image as a reference. After receiving it, call the "
        "generate_image tool with:\n"
        "- The user's image in the images array\n"
        f'- aspect_ratio: "{ratio}"\n'
        f'- image_size: "{resolution}"'
    )


def _character_multi_scene(args: PromptArgs) -> str:
    character = _arg(
        args,
        "character_description",
        "a young woman with short black hair, wearing a white blouse and navy skirt",
    )
    scenes = [s.strip() for s in _arg(args, "scenes", "park, library, cafe").split(",")]
    style = _arg(args, "style", "photorealistic")
    scene_list = "; ".join(f"Scene {i}: {scene}" for i, scene in enumerate(scenes, start=1))
    return (
        f"Generate {len(scenes)} images with a consistent character across different scenes. "
        "Use the generate_image tool for each scene.\n\n"
        f"Character: {character}\n"
        f"Style: {style}\n"
        f"Scenes: {scene_list}\n\n"
        "For each scene, use:\n"
        f'- prompt: "A {style} image of {character}, in [scene location]. The character\'s '
        "appearance, clothing, hairstyle, and facial features must remain exactly consistent. "
        '[Scene-specific details and atmosphere]."\n'
        '- aspect_ratio: "16:9"\n'
        '- image_size: "2K"\n\n'
        "IMPORTANT: Generate each scene one by one to maintain consistency. Reference the "
        "character description precisely in every prompt."
    )


_KNOWLEDGE_LAYOUTS = {
    "species": (
        "Include: scientific name, habitat, diet, conservation status, size comparison, and "
        "distribution map icon. Main illustration should be a detailed realistic portrait in "
        "its natural habitat."
    ),
    "landmark": (
        "Include: location, history highlights, visiting tips, architectural style, and a fun "
        "fact. Main illustration should be a beautiful scenic view."
    ),
    "food": (
        "Include: origin, key ingredients, nutrition facts, flavor profile, and preparation "
        "time. Main illustration should be an appetizing food photography style shot."
    ),
    "general": (
        "Include: key facts, interesting trivia, related topics, and a timeline if applicable. "
        "Main illustration should be visually engaging and informative."
    ),
}


def _knowledge_card(args: PromptArgs) -> str:
    subject = _arg(args, "subject", "Monarch Butterfly")
    card_type = _arg(args, "card_type", "species")
    language = _arg(args, "language", "Chinese")
    layout = _KNOWLEDGE_LAYOUTS.get(card_type, _KNOWLEDGE_LAYOUTS["general"])
    return _tool_call(
        "generate_image",
        f"Design an illustrated knowledge card about {subject}. {layout} Use a clean, modern "
        "infographic layout with a primary illustration taking up the top half and organized "
        f"fact sections below. All text in {language}. Style: scientific illustration meets "
        "modern flat design.",
        aspect_ratio='"3:4"',
        image_size='"2K"',
        use_google_search="true",
        thinking_config=_HIGH_THINKING,
    )


def _comic_storyboard(args: PromptArgs) -> str:
    story = _arg(args, "story", "A robot discovers a garden in an abandoned city")
    panels = _arg(args, "panels", "6")
    style = _arg(args, "style", "manga")
    character = _arg(args, "character", "the main character")
    return _tool_call(
        "generate_image",
        f"A {panels}-panel {style} comic storyboard. Story: {story}. Main character: "
        f"{character}. Layout: {panels} panels arranged in a grid on a single page, each panel "
        "clearly bordered. The panels should tell the story sequentially with varied "
        "compositions (close-up, wide shot, action, dialogue). Maintain consistent character "
        "design and art style across all panels. Include minimal dialogue text bubbles.",
        aspect_ratio='"3:4"',
        image_size='"2K"',
        thinking_config=_HIGH_THINKING,
    )


def _brand_logo_system(args: PromptArgs) -> str:
    brand = _arg(args, "brand_name", "TechFlow")
    industry = _arg(args, "industry", "tech startup")
    keywords = _arg(args, "keywords", "modern, clean, innovative")
    icon = f"Icon concept: {args['icon_idea']}. " if args.get("icon_idea") else ""
    return _tool_call(
        "generate_image",
        f"Design a comprehensive brand identity sheet for '{brand}', a {industry} brand. "
        f"{icon}Style keywords: {keywords}. The sheet should include: (1) Primary logo - clean "
        "and scalable, (2) Logo icon/mark standalone, (3) Color palette with 4-5 hex color "
        "swatches, (4) Typography pairing suggestion with sample text, (5) Two mockup "
        "applications (business card and app icon). Arrange everything on a clean white "
        f"presentation board with subtle grid lines. The brand name '{brand}' must be rendered "
        "clearly and correctly.",
        aspect_ratio='"4:3"',
        image_size='"4K"',
        thinking_config=_HIGH_THINKING,
    )


_DENSITY_NOTES = {
    "dense": "Pack more details and data points into the diagram, minimal whitespace.",
    "sparse": "Keep very loose with 40%+ whitespace, only key concepts.",
}


def _whiteboard_infographic(args: PromptArgs) -> str:
    topic = _arg(args, "topic", "How AI image generation works")
    language = _arg(args, "language", "bilingual Chinese and English")
    density = _arg(args, "density", "moderate")
    density_note = _DENSITY_NOTES.get(
        density, "Maintain 30%+ whitespace, balance between detail and clarity."
    )
    return _tool_call(
        "generate_image",
        f"Expert whiteboard teaching style infographic about '{topic}'. Clean white whiteboard "
        "or light gray grid paper background. Use marker-drawn lines, arrows, and boxes to build "
        "a flowchart or mind map. A simple stickman instructor in the corner pointing at key "
        "data. Title in bold handwritten style, body text as concise keywords using different "
        f"colored markers (red, blue, black) to highlight priorities. {density_note} All text "
        f"in {language}. Hand-drawn sketch aesthetic with marker pen texture.",
        aspect_ratio='"16:9"',
        image_size='"2K"',
    )


def _minimalist_cover(args: PromptArgs) -> str:
    subject = _arg(args, "subject", "flying bird")
    subject_color = _arg(args, "subject_color", "white")
    background = _arg(args, "background_color", "deep teal")
    text_note = (
        f" The text '{args['text']}' is cleverly integrated into the design composition."
        if args.get("text")
        else ""
    )
    return _tool_call(
        "generate_image",
        f"Minimalist negative space design, {subject_color} {subject} silhouette, {background} "
        "background. Flat vector illustration style, high contrast, clean composition, simple "
        "and elegant, modern graphic design. Use only 2-3 colors. Asymmetric layout, generous "
        f"whitespace, sharp edges. Professional notebook cover design.{text_note}",
        aspect_ratio='"3:4"',
        image_size='"2K"',
    )


def _vertical_comic_strip(args: PromptArgs) -> str:
    story = _arg(
        args,
        "story",
        "A day in the life of an office worker: alarm, subway, lunch, drowning in emails, "
        "moonlit exit, phone in bed",
    )
    panels = _arg(args, "panels", "6")
    style = _arg(args, "style", "Q-version cute chibi")
    language = _arg(args, "language", "Chinese")
    return _tool_call(
        "generate_image",
        f"A {panels}-panel vertical comic strip, {style} art style. Story: {story}. Panels flow "
        "from top to bottom in a single 9:16 vertical image. Each panel has a different "
        f"pastel/macaron background color. Include speech bubbles with {language} dialogue. "
        "Characters maintain consistent design across all panels. Mix cute expressions with "
        "humorous scenes. Clear panel borders.",
        aspect_ratio='"9:16"',
        image_size='"2K"',
        thinking_config=_HIGH_THINKING,
    )


def _ecommerce_product_suite(args: PromptArgs) -> str:
    product = _arg(args, "product", "artisan perfume")
    points = _arg(
        args,
        "selling_points",
        "natural botanical extracts, long-lasting fragrance, handcrafted glass bottle",
    )
    scene = _arg(args, "scene", "an elegant vanity table with soft morning light")
    style = _arg(args, "style", "luxury minimalist")
    shots = [
        (
            "Shot 1 - Hero Main Image** (white background, product centered)",
            f"{style} product photography of {product} on pure white background. Studio "
            "lighting, sharp details, slight shadow for depth. Clean and professional, suitable "
            "as the main listing image.",
        ),
        (
            "Shot 2 - Lifestyle Scene** (product in context)",
            f"{product} placed in {scene}. {style} photography, natural lighting, shallow depth "
            "of field. The product is the clear focal point with complementary props.",
        ),
        (
            "Shot 3 - Feature Callout** (key selling points annotated)",
            f"Product feature infographic for {product}. Clean layout showing the product with "
            f"labeled callout lines pointing to key features: {points}. Modern minimalist design "
            "with icons and brief text labels. White background.",
        ),
    ]
    sections = [
        f'**{heading}:\n- prompt: "{prompt}"\n- aspect_ratio: "1:1"\n- image_size: "2K"'
        for heading, prompt in shots
    ]
    return (
        f"Generate a suite of e-commerce product images for {product}. Use the generate_image "
        "tool for each of the following shots:\n\n"
        + "\n\n".join(sections)
        + "\n\nIf the user has a reference product photo, include it in the images array for "
        "each call."
    )


def _blindbox_miniature_store(args: PromptArgs) -> str:
    brand = _arg(args, "brand", "a cozy bookstore cafe")
    details = _arg(
        args,
        "details",
        "Two-story mini building with large glass windows showing bookshelves and coffee bar "
        "inside. Q-version characters browsing books and sipping coffee outside.",
    )
    mood = _arg(args, "color_mood", "warm afternoon sunlight")
    return _tool_call(
        "generate_image",
        f"3D Q-version miniature scene of {brand}, blind box figurine aesthetic, Cinema 4D "
        f"rendering quality. {details} Soft {mood} lighting, warm tones, macro photography-like "
        "shallow depth of field. The mini building is a detailed two-story structure. All "
        "characters are chibi-style with big heads, small bodies, PVC matte material finish. "
        "Highly detailed miniature world, tilt-shift effect.",
        aspect_ratio='"1:1"',
        image_size='"2K"',
        thinking_config=_HIGH_THINKING,
    )


def _timeline_illustration(args: PromptArgs) -> str:
    subject = _arg(args, "subject", "Chinese dynasties from Xia to 2026")
    vertical = _arg(args, "orientation", "horizontal") == "vertical"
    style = _arg(
        args,
        "style",
        "illustrated infographic with color gradient from ancient bronze tones to modern vivid "
        "colors",
    )
    language = _arg(args, "language", "Chinese")
    flow = "top to bottom" if vertical else "left to right"
    return _tool_call(
        "generate_image",
        f"An ultra-long timeline illustration of {subject}. Flowing {flow}, each era/milestone "
        f"represented by its most iconic visual element. {style}. A continuous river/path "
        f"serves as the time axis with labeled dates and milestones in {language}. Rich in "
        "detail with miniature scenes at each milestone point. Seamless transitions between "
        "periods.",
        aspect_ratio='"1:8"' if vertical else '"8:1"',
        image_size='"2K"',
        thinking_config=_HIGH_THINKING,
    )


def _city_food_culture_card(args: PromptArgs) -> str:
    city = _arg(args, "city", "Chengdu")
    food = _arg(args, "food", "boiling red-oil hotpot")
    landmark = _arg(args, "landmark", "Wide and Narrow Alleys")
    slogan = args.get("slogan")
    slogan_note = f" A speech bubble at the top reads '{slogan}'." if slogan else ""
    return _tool_call(
        "generate_image",
        f"3D isometric miniature scene of {city}. A tiny city block model sitting on a surface, "
        f"featuring a miniature {landmark} as the centerpiece, with a giant {food} as a "
        "prominent element. Q-version chibi characters are eating, walking, and enjoying the "
        "scene. Warm soft lighting, blind box figurine aesthetic, PVC matte material texture."
        f"{slogan_note} Highly detailed, tilt-shift photography effect, Cinema 4D rendering "
        "quality.",
        aspect_ratio='"1:1"',
        image_size='"2K"',
        thinking_config=_HIGH_THINKING,
    )


A = PromptArgumentSpec

IMAGE_PROMPTS: tuple[PromptTemplate, ...] = (
    PromptTemplate(
        name="ultra_wide_panorama",
        title="Ultra-Wide City Panorama",
        description=(
            "Generate an 8:1 ultra-wide panoramic cityscape for website banners, outdoor ads, "
            "and immersive wall art."
        ),
        arguments=(
            A("city", "City name (e.g., Shanghai, Tokyo, New York)", required=True),
            A("style", "Art style (e.g., photorealistic, watercolor, cyberpunk, ink wash)"),
            A("time_of_day", "Time of day (e.g., sunrise, golden hour, night)"),
            A("resolution", "Resolution: 512px, 1K, 2K, or 4K (default: 2K)"),
        ),
        build=_ultra_wide_panorama,
    ),
    PromptTemplate(
        name="weather_infographic",
        title="Real-Time Weather Infographic",
        description=(
            "Generate a weather infographic with real-time data via Google Search grounding."
        ),
        arguments=(
            A("city", "City name (e.g., Beijing, San Francisco)", required=True),
            A("language", "Display language (e.g., Chinese, English, Japanese)"),
            A("days", "Forecast range (e.g., today, 3-day, 5-day, 7-day)"),
        ),
        build=_weather_infographic,
    ),
    PromptTemplate(
        name="ecommerce_banner",
        title="E-Commerce Product Banner",
        description=(
            "Generate a 4:1 wide-format product promotion banner for hero sections, "
            "marketplace headers, and email campaigns."
        ),
        arguments=(
            A("product", "Product name and brief description", required=True),
            A("promotion", "Promotion text (e.g., Summer Sale 50% Off)"),
            A("color_theme", "Color theme (e.g., red and gold, minimalist white, dark luxury)"),
            A("resolution", "Resolution: 512px, 1K, 2K, or 4K (default: 2K)"),
        ),
        build=_ecommerce_banner,
    ),
    PromptTemplate(
        name="product_detail_long",
        title="Vertical Product Detail Page",
        description=(
            "Generate a 1:4 ultra-tall vertical layout for mobile product detail pages and "
            "scrollable infographics."
        ),
        arguments=(
            A("product", "Product name and key features", required=True),
            A("sections", "Number of visual sections (e.g., 3, 4, 5)"),
            A("style", "Visual style (e.g., Apple minimalist, vibrant lifestyle)"),
        ),
        build=_product_detail_long,
    ),
    PromptTemplate(
        name="scroll_painting_panorama",
        title="Chinese Scroll Painting Panorama",
        description=(
            "Generate an 8:1 ultra-wide scene inspired by classic Chinese horizontal scroll "
            "paintings, reimagining a modern city."
        ),
        arguments=(
            A("city", "City name to reimagine (e.g., Chengdu, Hangzhou)", required=True),
            A("variant", "Style variant: ink-wash, ghibli, pixel-art, or traditional"),
            A("resolution", "Resolution: 1K, 2K, or 4K (default: 2K)"),
        ),
        build=_scroll_painting_panorama,
    ),
    PromptTemplate(
        name="resize_and_enhance",
        title="Resize & Enhance Image",
        description=(
            "Resize an existing image to a new aspect ratio while preserving its content "
            "structure, optionally upscaling it."
        ),
        arguments=(
            A("target_ratio", "Target aspect ratio (e.g., 16:9, 9:16, 4:1, 1:1)", required=True),
            A("target_resolution", "Target resolution: 512px, 1K, 2K, or 4K (default: 2K)"),
            A("language", "If the image has text, translate to this language"),
            A("additional_instructions", "Any additional editing instructions"),
        ),
        build=_resize_and_enhance,
    ),
    PromptTemplate(
        name="character_multi_scene",
        title="Character Consistency Multi-Scene",
        description=(
            "Generate images of a consistent character across multiple scenes for storyboards, "
            "comics, and social media series."
        ),
        arguments=(
            A(
                "character_description",
                "Detailed character description (appearance, clothing, features)",
                required=True,
            ),
            A("scenes", "Comma-separated scene descriptions (e.g., park, library)", required=True),
            A("style", "Art style (e.g., anime, photorealistic, watercolor, comic)"),
        ),
        build=_character_multi_scene,
    ),
    PromptTemplate(
        name="knowledge_card",
        title="Search-Grounded Knowledge Card",
        description=(
            "Generate an illustrated knowledge card or species profile using real-time search "
            "data."
        ),
        arguments=(
            A("subject", "Subject to illustrate (e.g., Giant Panda)", required=True),
            A("card_type", "Card type: species, landmark, food, or general (default: species)"),
            A("language", "Display language (default: Chinese)"),
        ),
        build=_knowledge_card,
    ),
    PromptTemplate(
        name="comic_storyboard",
        title="Comic / Storyboard Panels",
        description=(
            "Generate a multi-panel comic storyboard with consistent characters and a cohesive "
            "narrative."
        ),
        arguments=(
            A("story", "Brief story outline or scenario description", required=True),
            A("panels", "Number of panels (e.g., 4, 6, 8, default: 6)"),
            A("style", "Comic style (e.g., manga, Marvel, European BD, minimalist)"),
            A("character", "Main character description for consistency"),
        ),
        build=_comic_storyboard,
    ),
    PromptTemplate(
        name="brand_logo_system",
        title="Brand Logo & Visual Identity",
        description=(
            "Generate a brand logo with visual identity explorations: logo, color palette, "
            "typography suggestion, and mockups."
        ),
        arguments=(
            A("brand_name", "Brand / company name", required=True),
            A("industry", "Industry or domain (e.g., tech startup, organic food)"),
            A("keywords", "Design keywords (e.g., modern, playful, premium)"),
            A("icon_idea", "Icon concept hint (e.g., a leaf, abstract wave)"),
        ),
        build=_brand_logo_system,
    ),
    PromptTemplate(
        name="whiteboard_infographic",
        title="Whiteboard Stickman Infographic",
        description=(
            "Generate a whiteboard teaching style infographic with marker-drawn diagrams and a "
            "stickman instructor."
        ),
        arguments=(
            A("topic", "Topic or content to visualize (e.g., 'How HTTP works')", required=True),
            A("language", "Text language: Chinese, English, or bilingual (default: bilingual)"),
            A("density", "Information density: sparse, moderate, or dense (default: moderate)"),
        ),
        build=_whiteboard_infographic,
    ),
    PromptTemplate(
        name="minimalist_cover",
        title="Minimalist Negative Space Cover",
        description=(
            "Generate a minimalist negative space cover design with a bold silhouette and "
            "limited colors."
        ),
        arguments=(
            A("subject", "Subject silhouette (e.g., flying bird, cat, mountain)", required=True),
            A("subject_color", "Color of the silhouette (e.g., white, black, red)"),
            A("background_color", "Background color (e.g., deep green, navy blue)"),
            A("text", "Optional text to integrate into the design"),
        ),
        build=_minimalist_cover,
    ),
    PromptTemplate(
        name="vertical_comic_strip",
        title="Vertical Comic Strip (9:16)",
        description=(
            "Generate a 9:16 vertical comic strip with sequential panels flowing top to bottom."
        ),
        arguments=(
            A("story", "Story outline with panel descriptions", required=True),
            A("panels", "Number of panels (e.g., 4, 6, 8, default: 6)"),
            A("style", "Art style (e.g., Q-version cute, manga, chibi, pixel-art)"),
            A("language", "Dialogue language (default: Chinese)"),
        ),
        build=_vertical_comic_strip,
    ),
    PromptTemplate(
        name="ecommerce_product_suite",
        title="E-Commerce Product Image Suite",
        description=(
            "Generate a set of product display images: main image, lifestyle scene, and "
            "feature callouts."
        ),
        arguments=(
            A("product", "Product name and type (e.g., artisan perfume)", required=True),
            A("selling_points", "Key selling points to highlight", required=True),
            A("scene", "Lifestyle scene context (e.g., modern bathroom)"),
            A("style", "Photography style (e.g., luxury minimalist, studio white)"),
        ),
        build=_ecommerce_product_suite,
    ),
    PromptTemplate(
        name="blindbox_miniature_store",
        title="Brand Blind Box Miniature Store",
        description=(
            "Generate a 3D Q-version miniature store scene in blind box/figurine aesthetic."
        ),
        arguments=(
            A("brand", "Brand or store name and type (e.g., 'Nintendo game store')", required=True),
            A("details", "Specific scene details (e.g., window display, characters outside)"),
            A("color_mood", "Color mood (e.g., warm afternoon, pastel spring, neon night)"),
        ),
        build=_blindbox_miniature_store,
    ),
    PromptTemplate(
        name="timeline_illustration",
        title="Ultra-Long Timeline Illustration",
        description=(
            "Generate an 8:1 or 1:8 ultra-long timeline illustration for historical timelines "
            "and product evolution."
        ),
        arguments=(
            A("subject", "Timeline subject (e.g., 'Evolution of smartphones')", required=True),
            A("orientation", "horizontal (8:1) or vertical (1:8), default: horizontal"),
            A("style", "Visual style (e.g., illustrated infographic, flat design)"),
            A("language", "Label language (default: Chinese)"),
        ),
        build=_timeline_illustration,
    ),
    PromptTemplate(
        name="city_food_culture_card",
        title="City x Food x Culture Fusion Card",
        description=(
            "Generate a 3D isometric miniature scene fusing a city's landmark, signature food, "
            "and local culture."
        ),
        arguments=(
            A("city", "City name (e.g., Chengdu, Guangzhou, Tokyo)", required=True),
            A("food", "Signature food (e.g., hotpot, dim sum, ramen)"),
            A("landmark", "City landmark (e.g., Canton Tower)"),
            A("slogan", "Local slogan or dialect phrase to display in a speech bubble"),
        ),
        build=_city_food_culture_card,
    ),
)

_BY_NAME = {template.name: template for template in IMAGE_PROMPTS}


def get_prompt_template(name: str) -> PromptTemplate:
    """Look up a template by name; raises KeyError for unknown names."""
    try:
        return _BY_NAME[name]
    except KeyError:
        raise KeyError(f"Unknown prompt: {name}") from None


def render_prompt(name: str, args: PromptArgs | None = None) -> str:
    """Render a template's message text."""
    return get_prompt_template(name).render(args)
