"""Link API domain: extract, classify, resolve and rewrite markdown links."""

from .apply_replacements import OFFSET_FALLBACK_WINDOW, apply_replacements
from .ApplyResult import ApplyResult
from .BatchResult import BatchResult
from .classify_link_type import classify_link_type
from .convert_to_relative import convert_to_relative
from .detect_link_style import detect_link_style
from .ExistenceCheckResult import ExistenceCheckResult
from .extract_anchor import extract_anchor
from .extract_links import extract_links
from .extract_links_from_directory import extract_links_from_directory
from .extract_links_from_file import extract_links_from_file
from .ExtractedLink import ExtractedLink
from .generate_existence_check_replacements import generate_existence_check_replacements
from .generate_normalization_replacements import generate_normalization_replacements
from .generate_path_substitution_replacements import generate_path_substitution_replacements
from .is_external_link import is_external_link
from .LinkTargetError import LinkTargetError
from .NormalizationStrategy import NormalizationStrategy
from .normalize_link_slashes import normalize_link_slashes
from .ParsedLink import ParsedLink
from .process_directory_with_link_replacements import process_directory_with_link_replacements
from .process_existence_check import process_existence_check
from .process_file_replacement import process_file_replacement
from .process_file_with_links import process_file_with_links
from .process_files_with_link_replacements import process_files_with_link_replacements
from .process_normalization import process_normalization
from .process_path_substitution import process_path_substitution
from .replace_link_on_line import replace_link_on_line
from .Replacement import Replacement
from .resolve_markdown_path import resolve_markdown_path
from .resolve_markdown_path_auto import resolve_markdown_path_auto
from .should_skip_link import should_skip_link
from .split_link_parts import split_link_parts
from .strip_anchor import strip_anchor
from .try_resolve_path_variants import try_resolve_path_variants

__all__ = [
    "OFFSET_FALLBACK_WINDOW",
    "ApplyResult",
    "BatchResult",
    "ExistenceCheckResult",
    "ExtractedLink",
    "LinkTargetError",
    "NormalizationStrategy",
    "ParsedLink",
    "Replacement",
    "apply_replacements",
    "classify_link_type",
    "convert_to_relative",
    "detect_link_style",
    "extract_anchor",
    "extract_links",
    "extract_links_from_directory",
    "extract_links_from_file",
    "generate_existence_check_replacements",
    "generate_normalization_replacements",
    "generate_path_substitution_replacements",
    "is_external_link",
    "normalize_link_slashes",
    "process_directory_with_link_replacements",
    "process_existence_check",
    "process_file_replacement",
    "process_file_with_links",
    "process_files_with_link_replacements",
    "process_normalization",
    "process_path_substitution",
    "replace_link_on_line",
    "resolve_markdown_path",
    "resolve_markdown_path_auto",
    "should_skip_link",
    "split_link_parts",
    "strip_anchor",
    "try_resolve_path_variants",
]
