from unittest import TestCase

from namesort.prioritize import prioritize, priority
from namesort.tokenizer.lexer import lex
from namesort.tokenizer.types import Tag


class Priority(TestCase):
    def test_1(self) -> None:
        ranked = sorted(Tag, key=priority)
        self.assertEqual(
            ranked, [Tag.Name, Tag.LowerCase, Tag.Other, Tag.Title, Tag.Space]
        )


class Prioritize(TestCase):
    def test_1(self) -> None:
        line = prioritize(lex("Otto von Bismark"))
        self.assertEqual(line.sort_key, ("Bismark", "Otto", "von", " ", " "))
        self.assertEqual(line.debug_render, "N:Bismark N:Otto L:von S:  S: ")
        self.assertEqual(line.original_line, "Otto von Bismark")

    def test_2(self) -> None:
        line = prioritize(lex("Prof. Dr. Kurt Melhorn"))
        self.assertEqual(
            line.sort_key, ("Melhorn", "Kurt", "Dr.", "Prof.", " ", " ", " ")
        )
        self.assertEqual(
            line.debug_render, "N:Melhorn N:Kurt T:Dr. T:Prof. S:  S:  S: "
        )

    def test_3(self) -> None:
        line = prioritize(lex("von der"))
        self.assertEqual(line.sort_key, ("der", "von", " "))

    def test_4(self) -> None:
        line = prioritize(lex("Dr."))
        self.assertEqual(line.sort_key, ("Dr.",))
        self.assertEqual(line.debug_render, "T:Dr.")

    def test_5(self) -> None:
        line = prioritize(lex("(c) ACME"))
        self.assertEqual(line.sort_key, ("ACME", "c)", "(", " "))
        self.assertEqual(line.debug_render, "N:ACME L:c) O:( S: ")

    def test_6(self) -> None:
        text = "\tProfessor Donald E. Knuth\r"
        self.assertEqual(prioritize(lex(text)).original_line, text)


class LastName(TestCase):
    def test_1(self) -> None:
        for text in (
            "Bismark",
            "Otto Bismark",
            "Otto Eduard Leopold von Bismark",
            "Dr. Otto von Bismark",
            "Prof. Dr. Otto Bismark",
        ):
            key = prioritize(lex(text)).sort_key
            self.assertEqual(key[0], "Bismark")

    def test_2(self) -> None:
        key = prioritize(lex("Gabriel García Márquez")).sort_key
        self.assertEqual(key[0], "Márquez")
