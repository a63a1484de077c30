from enum import Enum

# Values are the labels the application form submits.


class PublicationCategory(str, Enum):
    A = "A"
    B = "B"
    C = "C"


class PublicationKind(str, Enum):
    """Resolved publication class, one per record (see PublicationRecord.kind)."""
    TOP_JOURNAL = "top_journal"
    HIGH_LEVEL_CHINESE = "high_level_chinese"
    INFO_COMM = "info_comm"
    CATEGORY_A = "category_a"
    CATEGORY_B = "category_b"
    CATEGORY_C = "category_c"
    UNCLASSIFIED = "unclassified"


class CompetitionLevel(str, Enum):
    A_PLUS = "A+类"
    A = "A类"
    A_MINUS = "A-类"


class CompetitionAward(str, Enum):
    NATIONAL_FIRST_OR_ABOVE = "国家级一等奖及以上"
    NATIONAL_SECOND = "国家级二等奖"
    NATIONAL_THIRD = "国家级三等奖"
    PROVINCIAL_FIRST_OR_ABOVE = "省级一等奖及以上"
    PROVINCIAL_SECOND = "省级二等奖"


class AwardLevel(str, Enum):
    """Shared by innovation projects, honors and volunteer awards."""
    NATIONAL = "国家级"
    PROVINCIAL = "省级"
    SCHOOL = "校级"


class InnovationRole(str, Enum):
    LEAD = "组长"
    MEMBER = "成员"


class InnovationStatus(str, Enum):
    COMPLETED = "已结项"
    ONGOING = "在研"


class VolunteerSegmentType(str, Enum):
    NORMAL = "normal"
    LARGE_EVENT = "large_event"
    SUPPORT = "support"


class VolunteerRole(str, Enum):
    TEAM_LEADER = "TEAM_LEADER"
    TEAM_MEMBER = "TEAM_MEMBER"
    PERSONAL = "PERSONAL"


class SocialWorkLevel(str, Enum):
    EXEC = "EXEC"            # executive chair
    PRESIDIUM = "PRESIDIUM"
    HEAD = "HEAD"            # department head
    DEPUTY = "DEPUTY"
    MEMBER = "MEMBER"


class InternshipDuration(str, Enum):
    YEAR = "YEAR"
    SEMESTER = "SEMESTER"
    NONE = "NONE"


class SportScope(str, Enum):
    INTERNATIONAL = "国际级"
    NATIONAL = "国家级"


class SportResult(str, Enum):
    CHAMPION = "冠军"
    RUNNER_UP = "亚军"
    THIRD = "季军"
    FOURTH_TO_EIGHTH = "四至八名"
