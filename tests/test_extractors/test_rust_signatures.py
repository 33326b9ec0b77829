# libm-analyze - Signature catalog for libm code generators
# Copyright (c) 2025 Matt Varendorff
# https://github.com/mattyv/axiom
# SPDX-License-Identifier: BSL-1.0

"""Tests for extracting public function candidates from Rust sources."""

from libm_analyze.extractors.rust_signatures import (
    ItemKind,
    RustSignatureExtractor,
    classify_item,
)
from libm_analyze.models import TypeKind


class TestItemSelection:
    """Tests for which top-level items become candidates."""

    def test_public_function_is_extracted(self, parse_unit, rust_fn) -> None:
        unit = parse_unit(rust_fn("cos(x: f64) -> f64", "x"))

        candidates = RustSignatureExtractor().extract(unit)

        assert [c.ident for c in candidates] == ["cos"]
        assert candidates[0].file == "lib.rs"
        assert candidates[0].line == 3

    def test_private_and_restricted_functions_skipped(self, parse_unit) -> None:
        """Only plain `pub` counts as public."""
        unit = parse_unit(
            'fn private(x: f64) -> f64 { x }\n'
            'pub(crate) extern "C" fn crate_only(x: f64) -> f64 { x }\n'
            'pub extern "C" fn public(x: f64) -> f64 { x }\n'
        )

        candidates = RustSignatureExtractor().extract(unit)

        assert [c.ident for c in candidates] == ["public"]

    def test_non_function_items_skipped(self, parse_unit) -> None:
        unit = parse_unit(
            "pub struct Point { pub x: f64 }\n"
            "pub const PI: f64 = 3.14;\n"
            "pub use core::f64;\n"
            'pub extern "C" fn f(x: f64) -> f64 { x }\n'
        )

        candidates = RustSignatureExtractor().extract(unit)

        assert [c.ident for c in candidates] == ["f"]

    def test_nested_module_functions_skipped(self, parse_unit) -> None:
        """Functions inside inline modules are not top-level items."""
        unit = parse_unit(
            'mod inner {\n    pub extern "C" fn nested(x: f64) -> f64 { x }\n}\n'
            'pub extern "C" fn outer(x: f64) -> f64 { x }\n'
        )

        candidates = RustSignatureExtractor().extract(unit)

        assert [c.ident for c in candidates] == ["outer"]

    def test_classify_item(self, parse_unit) -> None:
        unit = parse_unit("pub fn f() {}\npub struct S;\n")
        kinds = [classify_item(n) for n in unit.root_node.named_children]

        assert kinds == [ItemKind.FUNCTION, ItemKind.OTHER]

    def test_declaration_order_kept(self, parse_unit, rust_fn) -> None:
        unit = parse_unit(
            rust_fn("tan(x: f64) -> f64", "x")
            + rust_fn("atan(x: f64) -> f64", "x")
            + rust_fn("acos(x: f64) -> f64", "x")
        )

        candidates = RustSignatureExtractor().extract(unit)

        assert [c.ident for c in candidates] == ["tan", "atan", "acos"]

    def test_ignored_names_dropped(self, parse_unit, rust_fn) -> None:
        unit = parse_unit(
            rust_fn("jn(n: i32, x: f64) -> f64", "x") + rust_fn("jnf(n: i32, x: f32) -> f32", "x")
        )

        candidates = RustSignatureExtractor(ignored={"jnf"}).extract(unit)

        assert [c.ident for c in candidates] == ["jn"]


class TestCandidateMetadata:
    """Tests for the raw metadata captured on each candidate."""

    def test_linkage_string(self, parse_unit) -> None:
        unit = parse_unit(
            'pub extern "C" fn a() {}\n'
            'pub extern "Rust" fn b() {}\n'
            "pub extern fn c() {}\n"
            "pub fn d() {}\n"
        )

        linkage = {c.ident: c.linkage for c in RustSignatureExtractor().extract(unit)}

        assert linkage == {"a": "C", "b": "Rust", "c": None, "d": None}

    def test_qualifiers(self, parse_unit) -> None:
        unit = parse_unit(
            "pub const fn k() {}\n"
            "pub async fn a() {}\n"
            'pub unsafe extern "C" fn u() {}\n'
        )

        by_name = {c.ident: c.qualifiers for c in RustSignatureExtractor().extract(unit)}

        assert by_name["k"].is_const and not by_name["k"].is_unsafe
        assert by_name["a"].is_async
        assert by_name["u"].is_unsafe and not by_name["u"].is_const

    def test_attributes_collected_across_comments(self, parse_unit) -> None:
        unit = parse_unit(
            "#[inline]\n"
            "// keep the no_panic check\n"
            "#[cfg_attr(all(test, assert_no_panic), no_panic::no_panic)]\n"
            'pub extern "C" fn f(x: f64) -> f64 { x }\n'
        )

        (candidate,) = RustSignatureExtractor().extract(unit)

        assert candidate.attrs == [
            "#[inline]",
            "#[cfg_attr(all(test, assert_no_panic), no_panic::no_panic)]",
        ]

    def test_attributes_do_not_leak_to_next_item(self, parse_unit) -> None:
        unit = parse_unit(
            "#[derive(Clone)]\npub struct S;\n"
            'pub extern "C" fn f(x: f64) -> f64 { x }\n'
        )

        (candidate,) = RustSignatureExtractor().extract(unit)

        assert candidate.attrs == []

    def test_generic_counts(self, parse_unit) -> None:
        unit = parse_unit(
            "pub fn t<T>(x: T) -> T { x }\n"
            "pub fn l<'a>(x: &'a f64) -> f64 { *x }\n"
            "pub fn c<const N: usize>(x: [f64; N]) -> f64 { x[0] }\n"
        )

        by_name = {c.ident: c.generics for c in RustSignatureExtractor().extract(unit)}

        assert (by_name["t"].type_params, by_name["t"].lifetime_params) == (1, 0)
        assert by_name["t"].text == "<T>"
        assert (by_name["l"].lifetime_params, by_name["l"].type_params) == (1, 0)
        assert (by_name["c"].const_params, by_name["c"].type_params) == (1, 0)

    def test_parameter_and_return_types(self, parse_unit, rust_fn) -> None:
        unit = parse_unit(rust_fn("modf(x: f64, iptr: *mut f64) -> f64", "x"))

        (candidate,) = RustSignatureExtractor().extract(unit)

        assert [p.text for p in candidate.params] == ["f64", "*mut f64"]
        assert candidate.params[1].kind == TypeKind.POINTER
        assert candidate.params[1].mutable
        assert candidate.params[1].pointee.text == "f64"
        assert candidate.ret.text == "f64"

    def test_no_return_type(self, parse_unit) -> None:
        unit = parse_unit('pub extern "C" fn reset(x: *mut f64) {}\n')

        (candidate,) = RustSignatureExtractor().extract(unit)

        assert candidate.ret is None

    def test_aggregate_and_reference_types(self, parse_unit) -> None:
        unit = parse_unit(
            'pub extern "C" fn f(a: &f64, b: [f32; 4], c: &[u8]) -> (f64, i32) { (0.0, 0) }\n'
        )

        (candidate,) = RustSignatureExtractor().extract(unit)

        kinds = [p.kind for p in candidate.params]
        assert kinds == [TypeKind.REFERENCE, TypeKind.ARRAY, TypeKind.REFERENCE]
        assert candidate.params[2].pointee.kind == TypeKind.SLICE
        assert candidate.ret.kind == TypeKind.TUPLE

    def test_scoped_path_segments(self, parse_unit) -> None:
        unit = parse_unit('pub extern "C" fn f(x: core::ffi::c_int) {}\n')

        (candidate,) = RustSignatureExtractor().extract(unit)

        assert candidate.params[0].kind == TypeKind.PATH
        assert candidate.params[0].segments == 3

    def test_extract_all_chains_units_in_order(self, parse_unit, rust_fn) -> None:
        units = [
            parse_unit(rust_fn("b(x: f64) -> f64", "x"), path="b.rs"),
            parse_unit(rust_fn("a(x: f64) -> f64", "x"), path="a.rs"),
        ]

        candidates = RustSignatureExtractor().extract_all(units)

        assert [(c.file, c.ident) for c in candidates] == [("b.rs", "b"), ("a.rs", "a")]
