"""Built-in slang vocabularies per supported language."""

from __future__ import annotations

from typing import Dict, FrozenSet

BUILTIN_SLANG: Dict[str, FrozenSet[str]] = {
    "en_us": frozenset(
        {
            "ain't",
            "gonna",
            "wanna",
            "y'all",
            "cool",
            "awesome",
            "lit",
            "dope",
            "bae",
            "fam",
            "yeet",
            "flex",
            "salty",
            "savage",
            "woke",
            "basic",
            "ghosting",
            "slay",
            "stan",
            "thirsty",
            "extra",
            "lowkey",
            "highkey",
            "sus",
            "cap",
            "no cap",
            "bet",
            "vibe",
            "simp",
            "bussin",
            "slaps",
            "fire",
            "tea",
            "shade",
            "snatched",
            "wig",
            "periodt",
            "deadass",
        }
    ),
    "en_uk": frozenset(
        {
            "mate",
            "bloke",
            "quid",
            "chuffed",
            "knackered",
            "cheeky",
            "gutted",
            "dodgy",
            "proper",
            "fit",
            "pissed",
            "naff",
            "skint",
            "gobsmacked",
            "minging",
            "snog",
            "innit",
            "bloody",
            "wanker",
            "bollocks",
            "chav",
            "posh",
            "fiver",
            "tenner",
            "brolly",
            "loo",
            "nosh",
            "peckish",
            "sorted",
            "fancy",
            "rubbish",
            "brilliant",
            "ace",
            "cheers",
        }
    ),
    "pt_PT": frozenset(
        {
            "fixe",
            "bué",
            "gajo",
            "pá",
            "bacano",
            "chavalo",
            "bazar",
            "curtir",
            "deitar",
            "grana",
            "massa",
            "moca",
            "piço",
            "puto",
            "tuga",
            "bera",
            "cota",
            "gaijo",
            "mano",
            "malta",
            "bué da",
            "ya",
            "tipo",
            "cenas",
            "brutal",
            "altamente",
            "baril",
            "belhote",
            "chunga",
            "giro",
            "porreiro",
        }
    ),
}

__all__ = ["BUILTIN_SLANG"]
