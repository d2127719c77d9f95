# marc_codec/core/domain/field_tags.py

"""Semantic field names and their tags in MARC21 and UNIMARC

The codec itself treats tags as opaque three character strings. This table
only serves callers that want to find, say, the title statement without
knowing which format's numbering applies. MARC XML uses MARC21 numbering.
"""

# Standard library imports
from enum import Enum

# Local imports
from marc_codec.core.domain.enums import MarcFormat


class FieldName(Enum):
    """Semantic bibliographic elements"""

    # Control fields
    CONTROL_NUMBER = "control_number"
    CONTROL_NUMBER_IDENTIFIER = "control_number_identifier"
    LATEST_TRANSACTION = "latest_transaction"
    FIXED_LENGTH_ADDITIONAL = "fixed_length_additional"
    PHYSICAL_DESCRIPTION_FIXED = "physical_description_fixed"
    FIXED_LENGTH_DATA = "fixed_length_data"
    LOCAL_CONTROL_NUMBER = "local_control_number"

    # Main entries
    MAIN_PERSONAL_NAME = "main_personal_name"
    MAIN_CORPORATE_NAME = "main_corporate_name"
    MAIN_MEETING_NAME = "main_meeting_name"
    MAIN_UNIFORM_TITLE = "main_uniform_title"

    # Titles
    TITLE_STATEMENT = "title_statement"
    VARYING_FORM_OF_TITLE = "varying_form_of_title"
    FORMER_TITLE = "former_title"
    PARALLEL_TITLE = "parallel_title"
    OTHER_TITLE_INFORMATION = "other_title_information"

    # Edition and material specific details
    EDITION_STATEMENT = "edition_statement"
    MUSICAL_PRESENTATION = "musical_presentation"
    CARTOGRAPHIC_MATHEMATICAL_DATA = "cartographic_mathematical_data"
    COMPUTER_FILE_CHARACTERISTICS = "computer_file_characteristics"
    COUNTRY_OF_PRODUCING_ENTITY = "country_of_producing_entity"
    PHILATELIC_ISSUE_DATA = "philatelic_issue_data"

    # Physical description
    PHYSICAL_DESCRIPTION = "physical_description"
    PLAYING_TIME = "playing_time"
    CURRENT_PUBLICATION_FREQUENCY = "current_publication_frequency"
    FORMER_PUBLICATION_FREQUENCY = "former_publication_frequency"
    PHYSICAL_MEDIUM = "physical_medium"
    ORGANIZATION_AND_ARRANGEMENT = "organization_and_arrangement"

    # Series
    SERIES_PERSONAL_NAME = "series_personal_name"
    SERIES_CORPORATE_NAME = "series_corporate_name"
    SERIES_MEETING_NAME = "series_meeting_name"
    SERIES_TITLE = "series_title"
    SERIES_STATEMENT = "series_statement"

    # Notes
    GENERAL_NOTE = "general_note"
    WITH_NOTE = "with_note"
    DISSERTATION_NOTE = "dissertation_note"
    BIBLIOGRAPHY_NOTE = "bibliography_note"
    CONTENTS_NOTE = "contents_note"
    SUMMARY = "summary"
    REPRODUCTION_NOTE = "reproduction_note"
    LANGUAGE_NOTE = "language_note"
    SOURCE_OF_DESCRIPTION_NOTE = "source_of_description_note"

    # Subject access
    SUBJECT_PERSONAL_NAME = "subject_personal_name"
    SUBJECT_CORPORATE_NAME = "subject_corporate_name"
    SUBJECT_MEETING_NAME = "subject_meeting_name"
    SUBJECT_UNIFORM_TITLE = "subject_uniform_title"
    SUBJECT_TOPICAL_TERM = "subject_topical_term"
    SUBJECT_GEOGRAPHIC_NAME = "subject_geographic_name"
    INDEX_TERM_UNCONTROLLED = "index_term_uncontrolled"
    INDEX_TERM_GENRE_FORM = "index_term_genre_form"
    INDEX_TERM_CURRICULUM_OBJECTIVE = "index_term_curriculum_objective"

    # Added entries
    ADDED_PERSONAL_NAME = "added_personal_name"
    ADDED_CORPORATE_NAME = "added_corporate_name"
    ADDED_MEETING_NAME = "added_meeting_name"
    ADDED_UNCONTROLLED_NAME = "added_uncontrolled_name"
    ADDED_UNIFORM_TITLE = "added_uniform_title"
    ADDED_RELATED_TITLE = "added_related_title"
    ADDED_GEOGRAPHIC_NAME = "added_geographic_name"

    # Linking entries
    MAIN_SERIES_ENTRY = "main_series_entry"
    SUBSERIES_ENTRY = "subseries_entry"
    ORIGINAL_LANGUAGE_ENTRY = "original_language_entry"
    TRANSLATION_ENTRY = "translation_entry"
    SUPPLEMENT_ENTRY = "supplement_entry"
    SUPPLEMENT_PARENT_ENTRY = "supplement_parent_entry"
    HOST_ITEM_ENTRY = "host_item_entry"
    CONSTITUENT_UNIT_ENTRY = "constituent_unit_entry"
    OTHER_EDITION_ENTRY = "other_edition_entry"
    ADDITIONAL_PHYSICAL_FORM_ENTRY = "additional_physical_form_entry"
    ISSUED_WITH_ENTRY = "issued_with_entry"
    PRECEDING_ENTRY = "preceding_entry"
    SUCCEEDING_ENTRY = "succeeding_entry"
    DATA_SOURCE_ENTRY = "data_source_entry"
    OTHER_RELATIONSHIP_ENTRY = "other_relationship_entry"


# (MARC21 tag, UNIMARC tag); None where the format has no equivalent
_TAG_ROWS: dict[FieldName, tuple[str | None, str | None]] = {
    FieldName.CONTROL_NUMBER: ("001", "001"),
    FieldName.CONTROL_NUMBER_IDENTIFIER: ("003", "003"),
    FieldName.LATEST_TRANSACTION: ("005", "005"),
    FieldName.FIXED_LENGTH_ADDITIONAL: ("006", None),
    FieldName.PHYSICAL_DESCRIPTION_FIXED: ("007", "007"),
    FieldName.FIXED_LENGTH_DATA: ("008", "100"),  # UNIMARC coded data block
    FieldName.LOCAL_CONTROL_NUMBER: (None, "009"),
    FieldName.MAIN_PERSONAL_NAME: ("100", "700"),
    FieldName.MAIN_CORPORATE_NAME: ("110", "710"),
    FieldName.MAIN_MEETING_NAME: ("111", "711"),
    FieldName.MAIN_UNIFORM_TITLE: ("130", "730"),
    FieldName.TITLE_STATEMENT: ("245", "200"),
    FieldName.VARYING_FORM_OF_TITLE: ("246", "517"),
    FieldName.FORMER_TITLE: ("247", "520"),
    FieldName.PARALLEL_TITLE: ("246", "510"),
    FieldName.OTHER_TITLE_INFORMATION: ("246", "517"),
    FieldName.EDITION_STATEMENT: ("250", "205"),
    FieldName.MUSICAL_PRESENTATION: ("254", None),
    FieldName.CARTOGRAPHIC_MATHEMATICAL_DATA: ("255", "206"),
    FieldName.COMPUTER_FILE_CHARACTERISTICS: ("256", "336"),
    FieldName.COUNTRY_OF_PRODUCING_ENTITY: ("257", None),
    FieldName.PHILATELIC_ISSUE_DATA: ("258", None),
    FieldName.PHYSICAL_DESCRIPTION: ("300", "215"),
    FieldName.PLAYING_TIME: ("306", "215"),
    FieldName.CURRENT_PUBLICATION_FREQUENCY: ("310", "326"),
    FieldName.FORMER_PUBLICATION_FREQUENCY: ("321", "326"),
    FieldName.PHYSICAL_MEDIUM: ("340", "215"),
    FieldName.ORGANIZATION_AND_ARRANGEMENT: ("351", "327"),
    FieldName.SERIES_PERSONAL_NAME: ("400", "410"),
    FieldName.SERIES_CORPORATE_NAME: ("410", "410"),
    FieldName.SERIES_MEETING_NAME: ("411", "411"),
    FieldName.SERIES_TITLE: ("440", "225"),
    FieldName.SERIES_STATEMENT: ("490", "225"),
    # UNIMARC notes keep the MARC21 numbering here
    FieldName.GENERAL_NOTE: ("500", "500"),
    FieldName.WITH_NOTE: ("501", "501"),
    FieldName.DISSERTATION_NOTE: ("502", "502"),
    FieldName.BIBLIOGRAPHY_NOTE: ("504", "504"),
    FieldName.CONTENTS_NOTE: ("505", "505"),
    FieldName.SUMMARY: ("520", "520"),
    FieldName.REPRODUCTION_NOTE: ("533", "533"),
    FieldName.LANGUAGE_NOTE: ("546", "546"),
    FieldName.SOURCE_OF_DESCRIPTION_NOTE: ("588", "588"),
    FieldName.SUBJECT_PERSONAL_NAME: ("600", "600"),
    FieldName.SUBJECT_CORPORATE_NAME: ("610", "610"),
    FieldName.SUBJECT_MEETING_NAME: ("611", "611"),
    FieldName.SUBJECT_UNIFORM_TITLE: ("630", "630"),
    FieldName.SUBJECT_TOPICAL_TERM: ("650", "606"),
    FieldName.SUBJECT_GEOGRAPHIC_NAME: ("651", "607"),
    FieldName.INDEX_TERM_UNCONTROLLED: ("653", "610"),
    FieldName.INDEX_TERM_GENRE_FORM: ("655", "608"),
    FieldName.INDEX_TERM_CURRICULUM_OBJECTIVE: ("658", None),
    FieldName.ADDED_PERSONAL_NAME: ("700", "700"),
    FieldName.ADDED_CORPORATE_NAME: ("710", "710"),
    FieldName.ADDED_MEETING_NAME: ("711", "711"),
    FieldName.ADDED_UNCONTROLLED_NAME: ("720", "720"),
    FieldName.ADDED_UNIFORM_TITLE: ("730", "730"),
    FieldName.ADDED_RELATED_TITLE: ("740", "740"),
    FieldName.ADDED_GEOGRAPHIC_NAME: ("751", "751"),
    FieldName.MAIN_SERIES_ENTRY: ("760", "410"),
    FieldName.SUBSERIES_ENTRY: ("762", "411"),
    FieldName.ORIGINAL_LANGUAGE_ENTRY: ("765", "454"),
    FieldName.TRANSLATION_ENTRY: ("767", "454"),
    FieldName.SUPPLEMENT_ENTRY: ("770", "488"),
    FieldName.SUPPLEMENT_PARENT_ENTRY: ("772", "488"),
    FieldName.HOST_ITEM_ENTRY: ("773", "461"),
    FieldName.CONSTITUENT_UNIT_ENTRY: ("774", "462"),
    FieldName.OTHER_EDITION_ENTRY: ("775", "453"),
    FieldName.ADDITIONAL_PHYSICAL_FORM_ENTRY: ("776", "452"),
    FieldName.ISSUED_WITH_ENTRY: ("777", "488"),
    FieldName.PRECEDING_ENTRY: ("780", "430"),
    FieldName.SUCCEEDING_ENTRY: ("785", "431"),
    FieldName.DATA_SOURCE_ENTRY: ("786", None),
    FieldName.OTHER_RELATIONSHIP_ENTRY: ("787", "488"),
}

FIELD_TAGS: dict[tuple[FieldName, MarcFormat], str] = {}
for _name, (_marc21, _unimarc) in _TAG_ROWS.items():
    if _marc21 is not None:
        FIELD_TAGS[(_name, MarcFormat.MARC21)] = _marc21
        FIELD_TAGS[(_name, MarcFormat.MARC_XML)] = _marc21
    if _unimarc is not None:
        FIELD_TAGS[(_name, MarcFormat.UNIMARC)] = _unimarc


def tag_for(name: FieldName, marc_format: MarcFormat) -> str | None:
    """Tag carrying ``name`` in ``marc_format``, or None if the format lacks it"""
    return FIELD_TAGS.get((name, marc_format))


def names_for_tag(tag: str, marc_format: MarcFormat) -> list[FieldName]:
    """Every semantic name that maps to ``tag`` in ``marc_format``"""
    return [
        name for (name, fmt), value in FIELD_TAGS.items() if fmt is marc_format and value == tag
    ]
