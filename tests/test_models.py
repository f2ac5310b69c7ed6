"""Tests for core.models: content records and SiteConfig."""

import pytest
from pydantic import ValidationError

from core.models import Project, SiteConfig, Skill, resolve_asset


class TestSkill:
    @pytest.mark.parametrize("proficiency, label", [
        (0.9, "90%"),
        (0.65, "65%"),
        (0.95, "95%"),
        (0.659, "65%"),
        (0.0, "0%"),
        (1.0, "100%"),
    ])
    def test_percent_label_truncates(self, proficiency: float, label: str) -> None:
        assert Skill(name="Flutter", proficiency=proficiency).percent_label == label

    @pytest.mark.parametrize("proficiency", [-0.1, 1.01])
    def test_proficiency_out_of_range(self, proficiency: float) -> None:
        with pytest.raises(ValidationError):
            Skill(name="Flutter", proficiency=proficiency)

    def test_frozen(self) -> None:
        skill = Skill(name="Flutter", proficiency=0.9)
        with pytest.raises(ValidationError):
            skill.proficiency = 0.1


class TestProject:
    def test_placeholder_live_url_means_no_demo(self) -> None:
        project = Project(title="T", description="D", repo_url="https://example.com", live_url="#")
        assert project.live_url is None
        assert not project.has_live_demo

    def test_real_live_url_kept(self) -> None:
        project = Project(title="T", description="D", repo_url="r", live_url=" https://demo.app ")
        assert project.live_url == "https://demo.app"
        assert project.has_live_demo

    def test_image_resolution(self, tmp_path) -> None:
        (tmp_path / "images").mkdir()
        (tmp_path / "images" / "shot.png").write_bytes(b"png")
        project = Project(title="T", description="D", repo_url="r", image="images/shot.png")

        assert project.get_image_path(tmp_path) == (tmp_path / "images" / "shot.png").resolve()

    def test_missing_image_is_none(self, tmp_path) -> None:
        project = Project(title="T", description="D", repo_url="r", image="images/none.png")
        assert project.get_image_path(tmp_path) is None

    def test_traversal_is_none(self, tmp_path) -> None:
        assert resolve_asset("../../etc/passwd", tmp_path) is None
        assert resolve_asset("", tmp_path) is None


class TestSiteConfig:
    def test_defaults(self) -> None:
        cfg = SiteConfig()

        assert cfg.author == "Ahmad Ali"
        assert [p.title for p in cfg.projects] == [
            "Course App UI", "Shoes Store App", "Weather App", "Car Rental App UI",
        ]
        assert [s.percent_label for s in cfg.skills] == ["90%", "95%", "65%", "65%"]
        assert [h.title for h in cfg.highlights] == ["1 Year", "10+ Projects", "Cross-Platform"]
        assert [link.label for link in cfg.social] == ["LinkedIn", "GitHub", "Email"]

    def test_hire_me_uri(self) -> None:
        uri = SiteConfig().contact.hire_me_uri

        assert uri.startswith("mailto:ahmadalirj99@gmail.com?")
        assert "subject=Hiring%20Inquiry" in uri
        assert "body=Hi%20Ahmad%2C%20I%20found" in uri

    def test_cv_download_url(self) -> None:
        assert SiteConfig().resources.cv_download_url == (
            "https://drive.google.com/uc?export=download&id=1uMDojJWcSRD_Y7MvCtpIvudcw9N68GYk"
        )

    def test_cv_download_url_empty_without_file(self) -> None:
        cfg = SiteConfig.model_validate({"resources": {"cv_file_id": ""}})
        assert cfg.resources.cv_download_url == ""

    def test_env_override(self, monkeypatch) -> None:
        monkeypatch.setenv("APP_AUTHOR", "Jane Doe")
        monkeypatch.setenv("APP_CONTACT__EMAIL", "jane@example.com")

        cfg = SiteConfig()

        assert cfg.author == "Jane Doe"
        assert cfg.contact.email == "jane@example.com"

    def test_features_only_cover_navigation(self) -> None:
        assert set(SiteConfig().features.model_dump()) == {"use_sidebar_nav"}
