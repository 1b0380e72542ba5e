import pytest
from course_parser import is_malformed_line, parse_course_line, split_fields


class TestSplitFields:
    def test_keeps_empty_fields(self):
        assert split_fields("A,B,,") == ["A", "B", "", ""]

    def test_strips_newline_only(self):
        assert split_fields(" A , B \n") == [" A ", " B "]

    def test_strips_crlf(self):
        assert split_fields("A,B\r\n") == ["A", "B"]

    def test_custom_delimiter(self):
        assert split_fields("A|B|C", delimiter="|") == ["A", "B", "C"]


class TestParseCourseLine:
    def test_number_title_prereqs(self):
        record = parse_course_line("CSCI300,Introduction to Algorithms,CSCI200,MATH201")
        assert record.number == "CSCI300"
        assert record.title == "Introduction to Algorithms"
        assert record.prerequisites == ("CSCI200", "MATH201")

    def test_number_and_title_only(self):
        record = parse_course_line("CSCI100,Intro to CS")
        assert record.prerequisites == ()
        assert not record.has_prerequisites

    def test_trailing_empty_fields_dropped(self):
        record = parse_course_line("MATH201,Calculus I,,")
        assert record.number == "MATH201"
        assert record.title == "Calculus I"
        assert record.prerequisites == ()

    def test_empty_slot_between_prereqs(self):
        record = parse_course_line("CSCI400,Capstone,csci301,,csci350")
        assert record.prerequisites == ("CSCI301", "CSCI350")

    def test_number_and_prereqs_normalized_title_verbatim(self):
        record = parse_course_line("csci101,intro to Programming,csci100")
        assert record.number == "CSCI101"
        assert record.title == "intro to Programming"
        assert record.prerequisites == ("CSCI100",)

    def test_whitespace_not_trimmed(self):
        record = parse_course_line(" csci101 , Intro , csci100 ")
        assert record.number == " CSCI101 "
        assert record.title == " Intro "
        assert record.prerequisites == (" CSCI100 ",)

    def test_prereq_need_not_exist(self):
        record = parse_course_line("CSCI900,Thesis,NOPE999")
        assert record.prerequisites == ("NOPE999",)

    def test_empty_line_gives_blank_record(self):
        record = parse_course_line("")
        assert record.number == ""
        assert record.title == ""
        assert record.prerequisites == ()

    def test_number_only_gives_blank_title(self):
        record = parse_course_line("csci100")
        assert record.number == "CSCI100"
        assert record.title == ""


class TestIsMalformedLine:
    @pytest.mark.parametrize("line", ["", "\n", "\r\n", "CSCI100"])
    def test_malformed(self, line):
        assert is_malformed_line(line) is True

    @pytest.mark.parametrize("line", ["CSCI100,Intro", "CSCI100,", ",", "A,B,C\n"])
    def test_well_formed(self, line):
        assert is_malformed_line(line) is False
