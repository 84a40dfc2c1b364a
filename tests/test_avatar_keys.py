import re

import pytest

from pet_registry.domain.services.avatar_keys import (
    avatar_key_prefix,
    build_avatar_key,
    uploaded_photo_key,
)


class TestBuildAvatarKey:
    def test_unknown_content_type_gets_random_bin_name(self):
        key = build_avatar_key("u", "p", "image/gif")

        assert re.fullmatch(r"pets/u/p/[0-9a-f]{32}\.bin", key)

    @pytest.mark.parametrize(
        "content_type, extension", [("image/jpeg", ".jpg"), ("image/png", ".png")]
    )
    def test_extension_follows_content_type(self, content_type, extension):
        key = build_avatar_key("u", "p", content_type)

        assert key.startswith(avatar_key_prefix("u", "p"))
        assert key.endswith(extension)

    def test_generated_keys_are_unique(self):
        assert build_avatar_key("u", "p", "image/jpeg") != build_avatar_key(
            "u", "p", "image/jpeg"
        )

    def test_explicit_file_name_is_used(self):
        assert build_avatar_key("u", "p", "image/png", "avatar") == "pets/u/p/avatar.png"


class TestUploadedPhotoKey:
    def test_keeps_client_file_name(self):
        assert uploaded_photo_key("u", "p", "buddy.jpg") == "pets/u/p/buddy.jpg"

    @pytest.mark.parametrize("file_name", ["../../x.jpg", "a/b/x.jpg", "C:\\photos\\x.jpg"])
    def test_only_last_segment_is_kept(self, file_name):
        assert uploaded_photo_key("u", "p", file_name) == "pets/u/p/x.jpg"

    @pytest.mark.parametrize("file_name", ["", ".", ".."])
    def test_empty_name_falls_back_to_random(self, file_name):
        key = uploaded_photo_key("u", "p", file_name)

        assert re.fullmatch(r"pets/u/p/[0-9a-f]{32}", key)
