"""Named filters that narrow a search to kinds of files."""

from __future__ import annotations

import enum
from dataclasses import dataclass


class QueryFlags(enum.IntFlag):
    """Options that change how a query matches."""

    MATCH_CASE = enum.auto()
    AUTO_MATCH_CASE = enum.auto()
    REGEX = enum.auto()
    SEARCH_IN_PATH = enum.auto()
    AUTO_SEARCH_IN_PATH = enum.auto()


class FilterFileType(enum.IntEnum):
    """Which kinds of entries a filter lets through."""

    NONE = 0
    FOLDERS = 1
    FILES = 2


@dataclass(frozen=True)
class Filter:
    """A named filter with an optional query of its own."""

    file_type: FilterFileType
    name: str | None
    query: str | None = None
    flags: QueryFlags = QueryFlags(0)


APPLICATION_FILTER = r"\.(desktop|DESKTOP)$"

DOCUMENT_FILTER = (
    r"\.(c|chm|cpp|csv|cxx|doc|docm|docx|dot|dotm|dotx|h|hpp|htm|html|hxx|ini|java|"
    r"lua|mht|mhtml|"
    r"ods|odt|odp|pdf|potx|potm|ppam|ppsm|ppsx|pps|ppt|pptm|pptx|rtf|sldm|sldx|thmx|"
    r"txt|vsd|wpd|wps|wri|"
    r"xlam|xls|xlsb|xlsm|xlsx|xltm|xltx|xml|C|CHM|CPP|CSV|CXX|DOC|DOCM|DOCX|DOT|DOTM|"
    r"DOTX|H|HPP|HTM|"
    r"HTML|HXX|INI|JAVA|LUA|MHT|MHTML|ODS|ODT|ODP|PDF|POTX|POTM|PPAM|PPSM|PPSX|PPS|PPT|"
    r"PPTM|PPTX|RTF|SLDM|"
    r"SLDX|THMX|TXT|VSD|WPD|WPS|WRI|XLAM|XLS|XLSB|XLSM|XLSX|XLTM|XLTX|XML)$"
)

AUDIO_FILTER = (
    r"\.(aac|ac3|aif|aifc|aiff|au|cda|dts|fla|flac|it|m1a|m2a|m3u|m4a|mid|midi|mka|mod|"
    r"mp2|mp3|mpa|"
    r"ogg|opus|ra|rmi|spc|rmi|snd|umx|voc|wav|wma|xm|AAC|AC3|AIF|AIFC|AIFF|AU|CDA|DTS|FLA|"
    r"FLAC|IT|"
    r"M1A|M2A|M3U|M4A|MID|MIDI|MKA|MOD|MP2|MP3|MPA|OGG|OPUS|RA|RMI|SPC|RMI|SND|UMX|VOC|"
    r"WAV|WMA|XM)$"
)

IMAGE_FILTER = (
    r"\.(ani|bmp|gif|ico|jpe|jpeg|jpg|pcx|png|psd|tga|tif|tiff|webp|wmf|ANI|BMP|GIF|ICO|"
    r"JPE|JPEG|"
    r"JPG|PCX|PNG|PSD|TGA|TIF|TIFF|WEBP|WMF)$"
)

VIDEO_FILTER = (
    r"\.(3g2|3gp|3gp2|3gpp|amr|amv|asf|avi|bdmv|bik|d2v|divx|drc|dsa|dsm|dss|dsv|evo|f4v|"
    r"flc|fli|"
    r"flic|flv|hdmov|ifo|ivf|m1v|m2p|m2t|m2ts|m2v|m4b|m4p|m4v|mkv|mp2v|mp4|mp4v|mpe|mpeg|"
    r"mpg|mpls|"
    r"mpv2|mpv4|mov|mts|ogm|ogv|pss|pva|qt|ram|ratdvd|rm|rmm|rmvb|roq|rpm|smil|smk|swf|tp|"
    r"tpr|ts|"
    r"vob|vp6|webm|wm|wmp|wmv|3G2|3GP|3GP2|3GPP|AMR|AMV|ASF|AVI|BDMV|BIK|D2V|DIVX|DRC|DSA|"
    r"DSM|DSS|"
    r"DSV|EVO|F4V|FLC|FLI|FLIC|FLV|HDMOV|IFO|IVF|M1V|M2P|M2T|M2TS|M2V|M4B|M4P|M4V|MKV|"
    r"MP2V|MP4|MP4V|"
    r"MPE|MPEG|MPG|MPLS|MPV2|MPV4|MOV|MTS|OGM|OGV|PSS|PVA|QT|RAM|RATDVD|RM|RMM|RMVB|ROQ|"
    r"RPM|SMIL|"
    r"SMK|SWF|TP|TPR|TS|VOB|VP6|WEBM|WM|WMP|WMV)$"
)

ARCHIVE_FILTER = (
    r"\.(7z|ace|arj|bz2|cab|gz|gzip|jar|r00|r01|r02|r03|r04|r05|r06|r07|r08|r09|r10|"
    r"r11|r12|r13|"
    r"r14|r15|r16|r17|r18|r19|r20|r21|r22|r23|r24|r25|r26|r27|r28|r29|rar|tar|tgz|z|zip|"
    r"7Z|ACE|ARJ|"
    r"BZ2|CAB|GZ|GZIP|JAR|R00|R01|R02|R03|R04|R05|R06|R07|R08|R09|R10|R11|R12|R13|R14|"
    r"R15|R16|R17|"
    r"R18|R19|R20|R21|R22|R23|R24|R25|R26|R27|R28|R29|RAR|TAR|TGZ|Z|ZIP)$"
)


def default_filters() -> list[Filter]:
    """Return the filters offered out of the box, in display order."""
    regex = QueryFlags.MATCH_CASE | QueryFlags.REGEX
    return [
        Filter(FilterFileType.NONE, "All"),
        Filter(FilterFileType.FOLDERS, "Folders"),
        Filter(FilterFileType.FILES, "Files"),
        Filter(FilterFileType.FILES, "Applications", APPLICATION_FILTER, regex),
        Filter(FilterFileType.FILES, "Archives", ARCHIVE_FILTER, regex),
        Filter(FilterFileType.FILES, "Audio", AUDIO_FILTER, regex),
        Filter(FilterFileType.FILES, "Documents", DOCUMENT_FILTER, regex),
        Filter(FilterFileType.FILES, "Pictures", IMAGE_FILTER, regex),
        Filter(FilterFileType.FILES, "Videos", VIDEO_FILTER, regex),
    ]