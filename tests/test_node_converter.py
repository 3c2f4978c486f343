import pytest

from figma2static.model.style_node import CornerRadii
from figma2static.node_converter import (
    POSITION_ABSOLUTE,
    StyleNodeConverter,
    read_bounding_box,
)


class TestConvertDocument:
    def test_one_node_per_page(self, figma_file) -> None:
        document = StyleNodeConverter().convert_document(figma_file)

        assert len(document.nodes) == 1
        page = document.nodes[0]
        assert page.id == "node-0-1"
        assert page.source_id == "0:1"
        assert page.safe_class == "Page_1_node-0-1"
        assert page.styles.position is None
        assert page.styles.background_color == "rgba(255,255,255,1)"

    def test_children_keep_source_order(self, figma_file) -> None:
        document = StyleNodeConverter().convert_document(figma_file)

        frame = document.nodes[0].children[0]
        assert [child.source_id for child in frame.children] == ["1:3", "1:4"]

    def test_ids_unique(self, figma_file) -> None:
        document = StyleNodeConverter().convert_document(figma_file)

        ids = [node.id for node in document.walk()]
        assert len(ids) == len(set(ids)) == 4

    def test_counters(self, figma_file) -> None:
        converter = StyleNodeConverter()
        converter.convert_document(figma_file)

        assert converter.performance_counters == {
            "nodes_processed": 4,
            "nodes_without_geometry": 1,
            "image_refs": 1,
        }
        assert converter.image_refs == {"1:4": "abc123"}

    def test_missing_document_children(self) -> None:
        document = StyleNodeConverter().convert_document({"document": {}})

        assert document.nodes == []


class TestFrameNode:
    def test_identifiers(self, frame_node) -> None:
        node = StyleNodeConverter().convert_node(frame_node)

        assert node.id == "node-1-2"
        assert node.name == "3 Buttons!"
        assert node.safe_class == "n3_Buttons_node-1-2"
        assert node.type == "FRAME"

    def test_geometry_without_parent_is_absolute(self, frame_node) -> None:
        node = StyleNodeConverter().convert_node(frame_node)

        assert (node.styles.position.x, node.styles.position.y) == (100, 200)
        assert (node.styles.size.width, node.styles.size.height) == (400, 300)

    def test_solid_red_background(self, frame_node) -> None:
        node = StyleNodeConverter().convert_node(frame_node)

        assert node.styles.background_color == "rgba(255,0,0,1)"

    def test_all_strokes_retained(self, frame_node) -> None:
        node = StyleNodeConverter().convert_node(frame_node)

        assert [(b.color, b.weight) for b in node.styles.border] == [
            ("rgba(0,0,255,1)", 2),
            ("rgba(0,255,0,1)", 2),
        ]

    def test_uniform_radius(self, frame_node) -> None:
        node = StyleNodeConverter().convert_node(frame_node)

        assert node.styles.border_radius == 8

    def test_auto_layout(self, frame_node) -> None:
        node = StyleNodeConverter().convert_node(frame_node)

        assert node.styles.display == "flex"
        assert node.styles.flex_direction == "HORIZONTAL"
        padding = node.styles.padding
        assert (padding.top, padding.right, padding.bottom, padding.left) == (5, 10, 5, 10)
        assert node.styles.item_spacing == 12

    def test_layout_mode_none_is_not_flex(self, frame_node) -> None:
        frame_node["layoutMode"] = "NONE"

        node = StyleNodeConverter().convert_node(frame_node)

        assert node.styles.display is None
        assert node.styles.flex_direction is None

    def test_no_text_color_on_frames(self, frame_node) -> None:
        node = StyleNodeConverter().convert_node(frame_node)

        assert node.styles.color is None
        assert node.text is None


class TestChildGeometry:
    def test_relative_to_parent_by_default(self, frame_node) -> None:
        node = StyleNodeConverter().convert_node(frame_node)

        text, image = node.children
        assert (text.styles.position.x, text.styles.position.y) == (10, 10)
        assert (image.styles.position.x, image.styles.position.y) == (50, 60)

    def test_absolute_mode(self, frame_node) -> None:
        node = StyleNodeConverter(POSITION_ABSOLUTE).convert_node(frame_node)

        text = node.children[0]
        assert (text.styles.position.x, text.styles.position.y) == (110, 210)

    def test_unknown_mode_rejected(self) -> None:
        with pytest.raises(ValueError):
            StyleNodeConverter("sideways")

    @pytest.mark.parametrize(
        "box",
        [None, "oops", {"x": 1, "y": 2}, {"x": 1, "y": 2, "width": "3", "height": 4}],
    )
    def test_malformed_box_skips_geometry(self, box) -> None:
        node = StyleNodeConverter().convert_node(
            {"id": "2:1", "name": "Box", "type": "RECTANGLE", "absoluteBoundingBox": box}
        )

        assert node.styles.position is None
        assert node.styles.size is None
        assert read_bounding_box({"absoluteBoundingBox": box}) is None


class TestTextNode:
    def test_text_styles_copied(self, text_node) -> None:
        node = StyleNodeConverter().convert_node(text_node)

        assert node.styles.font_size == 16
        assert node.styles.font_family == "Inter"
        assert node.styles.font_weight == 700
        assert node.styles.line_height == 19.5
        assert node.styles.letter_spacing == 0
        assert node.text == "Buy now"

    def test_red_fill_forces_white_text(self, text_node) -> None:
        node = StyleNodeConverter().convert_node(text_node)

        assert node.styles.color == "rgba(255,255,255,1)"

    def test_text_fill_is_painted_behind_the_text(self, text_node) -> None:
        node = StyleNodeConverter().convert_node(text_node)

        assert node.styles.background_color == "rgba(255,0,0,1)"
        assert node.styles.color == "rgba(255,255,255,1)"

    def test_background_paint_wins_over_fills(self, text_node) -> None:
        text_node["background"] = [{"type": "SOLID", "color": {"r": 1, "g": 1, "b": 1}}]

        node = StyleNodeConverter().convert_node(text_node)

        assert node.styles.color == "rgba(0,0,0,1)"

    def test_no_fills_defaults_to_black(self, text_node) -> None:
        text_node["fills"] = []

        node = StyleNodeConverter().convert_node(text_node)

        assert node.styles.color == "rgba(0,0,0,1)"

    def test_empty_characters(self, text_node) -> None:
        del text_node["characters"]

        node = StyleNodeConverter().convert_node(text_node)

        assert node.text == ""


class TestImageNode:
    def test_image_fill_registers_source_id(self, image_node) -> None:
        converter = StyleNodeConverter()
        node = converter.convert_node(image_node)

        assert converter.image_refs == {"1:4": "abc123"}
        assert node.styles.background_color is None
        assert node.asset_url is None

    def test_image_in_background_list(self) -> None:
        converter = StyleNodeConverter()
        converter.convert_node(
            {
                "id": "3:1",
                "name": "Bg",
                "type": "FRAME",
                "background": [{"type": "IMAGE", "imageRef": "zzz"}],
            }
        )

        assert converter.image_refs == {"3:1": "zzz"}

    def test_image_without_ref_ignored(self, image_node) -> None:
        image_node["fills"] = [{"type": "IMAGE"}]
        converter = StyleNodeConverter()
        converter.convert_node(image_node)

        assert converter.image_refs == {}

    def test_per_corner_radius(self, image_node) -> None:
        node = StyleNodeConverter().convert_node(image_node)

        assert node.styles.border_radius == CornerRadii(
            top_left=1, top_right=2, bottom_right=3, bottom_left=4
        )
