import io
import json
import unittest

from flask import Flask, request

from app.presentation.http.prompt_request_parser import (
    InvalidRequestBody,
    JsonPromptRequestParser,
    MultipartPromptRequestParser,
    parse_prompt_request,
    parse_quantity,
    parser_for,
)


_FIELDS = {
    "profession": "Dentista",
    "colorPalette": "Azul e Branco",
    "visualStyle": "Minimalista",
    "subject": "Saúde Bucal",
    "theme": "Prevenção",
}


class ParseQuantityTests(unittest.TestCase):
    def test_integer_strings(self):
        self.assertEqual(parse_quantity("3"), 3)
        self.assertEqual(parse_quantity(" 5 "), 5)
        self.assertEqual(parse_quantity("4 posts"), 4)

    def test_invalid_or_missing_defaults_to_one(self):
        for value in ("abc", "", None, "0", True, [], {}):
            self.assertEqual(parse_quantity(value), 1, msg=repr(value))

    def test_numbers_pass_through(self):
        self.assertEqual(parse_quantity(2), 2)
        self.assertEqual(parse_quantity(2.9), 2)


class ParserSelectionTests(unittest.TestCase):
    def test_multipart_content_type(self):
        self.assertIsInstance(
            parser_for("multipart/form-data; boundary=abc"), MultipartPromptRequestParser
        )

    def test_everything_else_is_json(self):
        for ct in ("application/json", "text/plain", None, ""):
            self.assertIsInstance(parser_for(ct), JsonPromptRequestParser)


class ParsePromptRequestTests(unittest.TestCase):
    def setUp(self):
        self.app = Flask(__name__)

    def test_multipart_fields_and_uploads(self):
        data = dict(_FIELDS)
        data.update(
            {
                "quantity": "3",
                "platform": "facebook",
                "artStyle": "Aquarela",
                "customText": "Agende já",
                "logo": (io.BytesIO(b"\x89PNG"), "logo.png"),
            }
        )
        with self.app.test_request_context(
            "/api/generate-prompt", method="POST", data=data, content_type="multipart/form-data"
        ):
            req = parse_prompt_request(request)

        self.assertEqual(req.profession, "Dentista")
        self.assertEqual(req.color_palette, "Azul e Branco")
        self.assertEqual(req.quantity, 3)
        self.assertEqual(req.platform, "facebook")
        self.assertEqual(req.art_style, "Aquarela")
        self.assertEqual(req.custom_text, "Agende já")
        self.assertTrue(req.has_logo)
        self.assertFalse(req.has_reference_image)

    def test_multipart_defaults(self):
        data = dict(_FIELDS)
        data.update({"quantity": "abc", "platform": ""})
        with self.app.test_request_context(
            "/api/generate-prompt", method="POST", data=data, content_type="multipart/form-data"
        ):
            req = parse_prompt_request(request)

        self.assertEqual(req.quantity, 1)
        self.assertEqual(req.platform, "instagram")
        self.assertIsNone(req.custom_text)
        self.assertFalse(req.has_logo)

    def test_multipart_empty_file_part_is_absent(self):
        data = dict(_FIELDS)
        data["referenceImage"] = (io.BytesIO(b""), "")
        with self.app.test_request_context(
            "/api/generate-prompt", method="POST", data=data, content_type="multipart/form-data"
        ):
            req = parse_prompt_request(request)

        self.assertFalse(req.has_reference_image)

    def test_json_body(self):
        body = dict(_FIELDS)
        body.update({"quantity": 2, "platform": "tiktok", "customText": "Oi", "referenceImage": "ref.jpg"})
        with self.app.test_request_context("/api/generate-prompt", method="POST", json=body):
            req = parse_prompt_request(request)

        self.assertEqual(req.theme, "Prevenção")
        self.assertEqual(req.quantity, 2)
        self.assertEqual(req.platform, "tiktok")
        self.assertTrue(req.has_custom_text)
        self.assertTrue(req.has_reference_image)
        self.assertFalse(req.has_logo)

    def test_json_defaults(self):
        with self.app.test_request_context("/api/generate-prompt", method="POST", json=dict(_FIELDS)):
            req = parse_prompt_request(request)

        self.assertEqual(req.platform, "instagram")
        self.assertEqual(req.quantity, 1)
        self.assertIsNone(req.art_style)

    def test_json_without_content_type_header_is_parsed(self):
        with self.app.test_request_context(
            "/api/generate-prompt", method="POST", data=json.dumps(_FIELDS), content_type="text/plain"
        ):
            req = parse_prompt_request(request)

        self.assertEqual(req.subject, "Saúde Bucal")

    def test_invalid_json_raises(self):
        for raw in ("{not json", "[1, 2]", ""):
            with self.app.test_request_context(
                "/api/generate-prompt", method="POST", data=raw, content_type="application/json"
            ):
                with self.assertRaises(InvalidRequestBody):
                    parse_prompt_request(request)


if __name__ == "__main__":
    unittest.main()
