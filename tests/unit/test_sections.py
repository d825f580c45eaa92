from app.analysis.sections import is_section_heading, missing_sections


class TestIsSectionHeading:
    def test_numbered_prefixes(self) -> None:
        assert is_section_heading("1) Materials Identified")
        assert is_section_heading("4) Sustainable Alternatives")

    def test_other_lines(self) -> None:
        assert not is_section_heading("5) Extra notes")
        assert not is_section_heading(" 1) indented")
        assert not is_section_heading("Cardboard")


class TestMissingSections:
    def test_complete_analysis(self, analysis_text: str) -> None:
        assert missing_sections(analysis_text) == []

    def test_reports_absent_sections_in_order(self) -> None:
        text = "1) Materials Identified\nGlass\n3) CO2 Emissions Estimate\n1 kg"
        assert missing_sections(text) == ["Environmental Impact", "Sustainable Alternatives"]

    def test_unstructured_text(self) -> None:
        assert len(missing_sections("A glass jar.")) == 4
