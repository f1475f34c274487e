"""Haskell outlines and definition search against the real grammar."""

from __future__ import annotations

from codeoutline.outline import Language, OutlineKind, search_source
from tests.outline.fakes import kinds_and_names

SOURCE = """\
module Main where

import Data.Map.Strict
import qualified Data.Text as T

data Color = Red | Green | Blue

newtype Name = Name String

type Alias = String

class Printable a where
  display :: a -> String

instance Printable Color where
  display Red = "red"

add :: Int -> Int -> Int
add x y = x + y
"""


class TestHaskellOutline:
    def test_declarations_through_wrappers(self, outline_of) -> None:
        pairs = kinds_and_names(outline_of(SOURCE, Language.HASKELL))

        assert ("import", "Data.Map.Strict") in pairs
        assert ("import", "Data.Text") in pairs
        assert ("enum", "Color") in pairs
        assert ("struct", "Name") in pairs
        assert ("type", "Alias") in pairs
        assert ("interface", "Printable") in pairs
        assert ("function", "add") in pairs

    def test_instance_is_named_after_its_class(self, outline_of) -> None:
        entries = outline_of(SOURCE, Language.HASKELL)

        instances = [e for e in entries if e.kind is OutlineKind.CLASS]
        assert len(instances) == 1
        assert "Printable" in instances[0].name

    def test_header_is_not_an_entry(self, outline_of) -> None:
        entries = outline_of(SOURCE, Language.HASKELL)

        assert all(entry.name != "Main" for entry in entries)

    def test_value_bindings_classified_by_expression(self, outline_of) -> None:
        source = 'add = \\x y -> x + y\ngreeting = "hi"\n'

        pairs = kinds_and_names(outline_of(source, Language.HASKELL))

        assert pairs == [("function", "add"), ("variable", "greeting")]

    def test_signature_only_file(self, outline_of) -> None:
        """An interface-style file of signatures and types outlines cleanly."""
        # Given
        source = (
            "module Shapes where\n\n"
            "type Radius = Double\n"
            "data Shape = Circle Radius\n"
            "area :: Shape -> Double\n"
            "perimeter :: Shape -> Double\n"
        )

        # When
        entries = outline_of(source, Language.HASKELL)

        # Then
        assert kinds_and_names(entries) == [
            ("type", "Radius"),
            ("enum", "Shape"),
            ("function", "area"),
            ("function", "perimeter"),
        ]
        assert all(entry.start_line == entry.end_line for entry in entries)

    def test_pragmas_only(self, outline_of) -> None:
        assert outline_of("{-# LANGUAGE OverloadedStrings #-}\n", Language.HASKELL) == []

    def test_import_only(self, outline_of) -> None:
        entries = outline_of("import Data.List (sort)\n", Language.HASKELL)

        assert kinds_and_names(entries) == [("import", "Data.List")]


class TestHaskellSearch:
    def test_data_type(self) -> None:
        result = search_source(
            b"data Shape = Circle Double | Rect Double Double\n", Language.HASKELL, "Shape"
        )

        assert [(m.kind, m.node_kind) for m in result.matches] == [
            (OutlineKind.ENUM, "data_type")
        ]

    def test_type_synonym(self) -> None:
        result = search_source(SOURCE.encode(), Language.HASKELL, "Alias")

        assert [m.kind for m in result.matches] == [OutlineKind.TYPE_ALIAS]
        assert result.matches[0].span.start_line == 10

    def test_class_and_instance_both_match(self) -> None:
        result = search_source(SOURCE.encode(), Language.HASKELL, "Printable")

        assert {m.kind for m in result.matches} == {OutlineKind.INTERFACE, OutlineKind.CLASS}
        assert len(result.matches) == 2

    def test_imports_never_match(self) -> None:
        result = search_source(SOURCE.encode(), Language.HASKELL, "Data.Map.Strict")

        assert result.matches == []
