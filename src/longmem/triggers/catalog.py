"""Trigger pattern catalog for memory auto-capture.

Each supported language contributes a table of ``(pattern, category, weight)``
records. The ``common`` table holds language-agnostic rules (phone numbers,
email addresses) and is active under every language filter.

Categories:
    remember: explicit memory commands
    preference: likes, dislikes, wishes
    decision: decisions made
    identity: personal info (name, age, contacts)
    fact: general facts about the user
    importance: markers of importance
"""

import re
from dataclasses import dataclass, field
from enum import Enum


class TriggerCategory(str, Enum):
    """Semantic category reported by a trigger."""

    REMEMBER = "remember"
    PREFERENCE = "preference"
    DECISION = "decision"
    IDENTITY = "identity"
    FACT = "fact"
    IMPORTANCE = "importance"


COMMON = "common"

# Ukrainian precedes Russian: shared phrases report "uk" under "auto".
SUPPORTED_LANGUAGES: tuple[str, ...] = (
    "uk",
    "ru",
    "en",
    "by",
    "kk",
    "cz",
    "fr",
    "es",
    "it",
    "pt",
    "de",
)

REMEMBER = TriggerCategory.REMEMBER
PREFERENCE = TriggerCategory.PREFERENCE
DECISION = TriggerCategory.DECISION
IDENTITY = TriggerCategory.IDENTITY
FACT = TriggerCategory.FACT
IMPORTANCE = TriggerCategory.IMPORTANCE

# Straight, typographic and modifier-letter apostrophes
_APOS = "['’ʼ]"


@dataclass(frozen=True)
class TriggerRule:
    """A single capture trigger.

    Attributes:
        pattern: Regular expression source, matched case-insensitively.
        category: Category reported when the rule fires.
        language: Language code from SUPPORTED_LANGUAGES, or "common".
        weight: Priority among firing rules (2 for explicit intent).
    """

    pattern: str
    category: TriggerCategory
    language: str
    weight: int = 1
    regex: re.Pattern[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if not isinstance(self.category, TriggerCategory):
            raise ValueError(f"Invalid trigger category: {self.category!r}")
        if self.language != COMMON and self.language not in SUPPORTED_LANGUAGES:
            raise ValueError(f"Invalid trigger language: {self.language!r}")
        if self.weight < 1:
            raise ValueError(f"Trigger weight must be positive: {self.pattern!r}")
        object.__setattr__(self, "regex", re.compile(self.pattern, re.IGNORECASE))

    def matches(self, text: str) -> bool:
        """Return True if the pattern occurs anywhere in text."""
        return self.regex.search(text) is not None


# ============================================================================
# Rule tables: (pattern, category, weight)
# ============================================================================

_COMMON_RULES = [
    # Phone numbers: +7 913 915 4040, 8-913-915-40-40, +1 (555) 123-4567.
    # Without "+" only 11-digit numbers with a 7 or 8 trunk prefix count.
    (r"(?<![\w+])(?:\+\d{1,3}|[78])[\s-]?\(?\d{3}\)?[\s-]?\d{3}[\s-]?\d{2}[\s-]?\d{2}(?!\d)", IDENTITY, 2),
    # Email addresses
    (r"[\w.+-]+@[\w-]+(?:\.[\w-]+)*\.\w{2,}", IDENTITY, 2),
]

_UK_RULES = [
    (rf"\bзапам{_APOS}?ятай(?:те)?\b", REMEMBER, 2),
    (r"\bне забудь(?:те)?\b", REMEMBER, 2),
    (rf"\bпам{_APOS}?ятай(?:те)?\b", REMEMBER, 2),
    (r"\bзапиши\b", REMEMBER, 1),
    (r"\bна майбутнє\b", REMEMBER, 1),
    (r"\bмай на увазі\b", REMEMBER, 1),
    (r"\bврахуй\b", REMEMBER, 1),
    (r"\b(?:мені )?(?:подобається|подобаються)\b", PREFERENCE, 1),
    (r"\b(?:віддаю перевагу|обожнюю)\b", PREFERENCE, 1),
    (r"\bненавиджу\b", PREFERENCE, 1),
    (r"\b(?:мій|моя|моє) улюблен(?:ий|а|е)\b", PREFERENCE, 1),
    (r"\b(?:ми )?вирішили\b", DECISION, 1),
    (r"\bбудемо (?:використовувати|застосовувати)\b", DECISION, 1),
    (r"\bвідтепер\b", DECISION, 1),
    (r"\bмене звати\b", IDENTITY, 2),
    (rf"\bмо[єе] ім{_APOS}?я\b", IDENTITY, 2),
    (r"\bклич мене\b", IDENTITY, 1),
    (r"\b(?:мій|моя) (?:телефон|email|пошта|адреса|день народження)\b", IDENTITY, 1),
    (r"\bмені \d{1,3} (?:рік|роки|років)\b", IDENTITY, 1),
    (r"\bя (?:працюю|живу|навчаюсь|навчаюся)\b", FACT, 1),
    (r"\bу мене (?:є|маю)\b", FACT, 1),
    (r"\bя народи(?:вся|лася) в\b", FACT, 1),
    (r"\bважливо\b", IMPORTANCE, 1),
    (r"\bзавжди\b", IMPORTANCE, 1),
    (r"\bніколи\b", IMPORTANCE, 1),
    (rf"\bобов{_APOS}?язково\b", IMPORTANCE, 1),
]

_RU_RULES = [
    (r"\bзапомни(?:те)?\b", REMEMBER, 2),
    (r"\bне забудь(?:те)?\b", REMEMBER, 2),
    (r"\bпомни\b", REMEMBER, 2),
    (r"\bзаруби на носу\b", REMEMBER, 2),
    (r"\bзапиши\b", REMEMBER, 1),
    (r"\bна будущее\b", REMEMBER, 1),
    (r"\bимей в виду\b", REMEMBER, 1),
    (r"\bучти\b", REMEMBER, 1),
    (r"\b(?:мне )?(?:нравится|нравятся)\b", PREFERENCE, 1),
    (r"\b(?:люблю|предпочитаю|обожаю)\b", PREFERENCE, 1),
    (r"\bненавижу\b", PREFERENCE, 1),
    (r"\b(?:мой|моя|моё|мое) любим(?:ый|ая|ое)\b", PREFERENCE, 1),
    (r"\bя фанат\b", PREFERENCE, 1),
    (r"\bя хочу\b", PREFERENCE, 1),
    (r"\b(?:мы )?решили\b", DECISION, 1),
    (r"\bя решила?\b", DECISION, 1),
    (r"\bбудем (?:использовать|применять)\b", DECISION, 1),
    (r"\bдавай(?:те)? (?:использовать|применять)\b", DECISION, 1),
    (r"\bотныне\b", DECISION, 1),
    (r"\bтеперь всегда\b", DECISION, 1),
    (r"\bменя зовут\b", IDENTITY, 2),
    (r"\bмо[её] имя\b", IDENTITY, 2),
    (r"\bзови меня\b", IDENTITY, 1),
    (r"\b(?:мой|моя) (?:телефон|email|почта|адрес|день рождения)\b", IDENTITY, 1),
    (r"\bмне \d{1,3} (?:год|года|лет)\b", IDENTITY, 1),
    (r"\bя (?:работаю|живу|учусь)\b", FACT, 1),
    (r"\bу меня (?:есть|имеется)\b", FACT, 1),
    (r"\bя по профессии\b", FACT, 1),
    (r"\bя родил(?:ся|ась) в\b", FACT, 1),
    (r"\bя (?:посещала?|закончила?|окончила?)\b", FACT, 1),
    (r"\bважно\b", IMPORTANCE, 1),
    (r"\bвсегда\b", IMPORTANCE, 1),
    (r"\bникогда\b", IMPORTANCE, 1),
    (r"\bобязательно\b", IMPORTANCE, 1),
    (r"\bкритично\b", IMPORTANCE, 1),
]

_EN_RULES = [
    (r"\bremember\b", REMEMBER, 2),
    (rf"\bdon{_APOS}?t forget\b", REMEMBER, 2),
    (r"\bkeep in mind\b", REMEMBER, 2),
    (r"\bnote that\b", REMEMBER, 1),
    (r"\bmake a note\b", REMEMBER, 1),
    (r"\bfor (?:the )?future\b", REMEMBER, 1),
    (rf"\bi (?:like|love|prefer|enjoy|hate|dislike|can{_APOS}?t stand)\b", PREFERENCE, 1),
    (r"\bmy favou?rite\b", PREFERENCE, 1),
    (rf"\bi(?:{_APOS}m| am) (?:a fan of|into|fond of)\b", PREFERENCE, 1),
    (rf"\bi don{_APOS}?t (?:like|want|need)\b", PREFERENCE, 1),
    (r"\b(?:we |i )?decided\b", DECISION, 1),
    (rf"\b(?:we{_APOS}?ll|i{_APOS}?ll) (?:use|go with|choose)\b", DECISION, 1),
    (rf"\blet{_APOS}?s (?:use|go with|stick with)\b", DECISION, 1),
    (r"\bfrom now on\b", DECISION, 1),
    (r"\bmy name is\b", IDENTITY, 2),
    (rf"\bi(?:{_APOS}m| am) called\b", IDENTITY, 1),
    (r"\bcall me\b", IDENTITY, 1),
    (r"\bmy (?:phone|email|address|birthday)\b", IDENTITY, 1),
    (rf"\bi(?:{_APOS}m| am) \d{{1,3}} years old\b", IDENTITY, 1),
    (rf"\bi(?:{_APOS}m| am) (?:a |an )?\w+\b", FACT, 1),
    (r"\bi (?:work|live|study) (?:at|in|for)\b", FACT, 1),
    (r"\bi have (?:a |an )?\w+\b", FACT, 1),
    (r"\bi was born in\b", FACT, 1),
    (r"\b(?:very )?important\b", IMPORTANCE, 1),
    (r"\balways\b", IMPORTANCE, 1),
    (r"\bnever\b", IMPORTANCE, 1),
    (r"\bmust (?:remember|know)\b", IMPORTANCE, 1),
]

_BY_RULES = [
    (r"\bзапомні\b", REMEMBER, 2),
    (r"\bне забудзь\b", REMEMBER, 2),
    (r"\bпамятай\b", REMEMBER, 2),
    (r"\bзапішы\b", REMEMBER, 1),
    (r"\b(?:мне )?(?:падабаецца|падабаюцца)\b", PREFERENCE, 1),
    (r"\bаддаю перавагу\b", PREFERENCE, 1),
    (r"\bненавіджу\b", PREFERENCE, 1),
    (r"\b(?:мой|мая|маё) любім(?:ы|ая|ае)\b", PREFERENCE, 1),
    (r"\b(?:мы )?вырашылі\b", DECISION, 1),
    (r"\bбудзем (?:выкарыстоўваць|ужываць)\b", DECISION, 1),
    (r"\bмяне завуць\b", IDENTITY, 2),
    (r"\bмаё імя\b", IDENTITY, 2),
    (r"\bкліч мяне\b", IDENTITY, 1),
    (r"\bя (?:працую|жыву|вучуся)\b", FACT, 1),
    (r"\bу мяне (?:ёсць|маю)\b", FACT, 1),
    (r"\bважна\b", IMPORTANCE, 1),
    (r"\bзаўсёды\b", IMPORTANCE, 1),
    (r"\bніколі\b", IMPORTANCE, 1),
    (r"\bабавязкова\b", IMPORTANCE, 1),
]

_KK_RULES = [
    (r"\bесіңде сақта\b", REMEMBER, 2),
    (r"\bесте сақта\b", REMEMBER, 2),
    (r"\bұмытпа\b", REMEMBER, 2),
    (r"\bжазып ал\b", REMEMBER, 1),
    (r"\b(?:маған )?ұнайды\b", PREFERENCE, 1),
    (r"\b(?:жақсы көремін|ұнатамын|жек көремін)\b", PREFERENCE, 1),
    (r"\bсүйікті\b", PREFERENCE, 1),
    (r"\bшеш(?:тік|тім)\b", DECISION, 1),
    (r"\bқолданамыз\b", DECISION, 1),
    (r"\bбұдан былай\b", DECISION, 1),
    (r"\bменің атым\b", IDENTITY, 2),
    (r"\bменің есімім\b", IDENTITY, 2),
    (r"\bмені \w+ деп ата\b", IDENTITY, 1),
    (r"\bменің (?:телефоным|поштам|мекенжайым|туған күнім)\b", IDENTITY, 1),
    (r"\bмен \d{1,3} жастамын\b", IDENTITY, 1),
    (r"\b(?:жұмыс істеймін|тұрамын|оқимын)\b", FACT, 1),
    (r"\bменде \w+ бар\b", FACT, 1),
    (r"\bмаңызды\b", IMPORTANCE, 1),
    (r"\bәрқашан\b", IMPORTANCE, 1),
    (r"\bешқашан\b", IMPORTANCE, 1),
    (r"\bміндетті түрде\b", IMPORTANCE, 1),
]

_CZ_RULES = [
    (r"\bzapamatuj si\b", REMEMBER, 2),
    (r"\bpamatuj\b", REMEMBER, 2),
    (r"\bnezapomeň\b", REMEMBER, 2),
    (r"\bpoznamenej si\b", REMEMBER, 1),
    (r"\bdo budoucna\b", REMEMBER, 1),
    (r"\b(?:mám )?ráda?\b", PREFERENCE, 1),
    (r"\b(?:preferuji|radši|nechci|nesnáším)\b", PREFERENCE, 1),
    (r"\b(?:můj|moje) oblíben(?:ý|á|é)\b", PREFERENCE, 1),
    (r"\brozhodli jsme\b", DECISION, 1),
    (r"\brozhodla? jsem\b", DECISION, 1),
    (r"\bbudeme používat\b", DECISION, 1),
    (r"\bod (?:teď|nynějška)\b", DECISION, 1),
    (r"\bjmenuj[iu] se\b", IDENTITY, 2),
    (r"\bříkej mi\b", IDENTITY, 1),
    (r"\b(?:můj|moje) (?:telefon|e-?mail|adresa|narozeniny)\b", IDENTITY, 1),
    (r"\bpracuji (?:v|u|pro)\b", FACT, 1),
    (r"\bbydlím v\b", FACT, 1),
    (r"\bstuduji\b", FACT, 1),
    (r"\bnarodila? jsem se\b", FACT, 1),
    (r"\bdůležité\b", IMPORTANCE, 1),
    (r"\bvždy\b", IMPORTANCE, 1),
    (r"\bnikdy\b", IMPORTANCE, 1),
]

_FR_RULES = [
    (r"\bsouviens[- ]toi\b", REMEMBER, 2),
    (r"\bretiens\b", REMEMBER, 2),
    (rf"\bn{_APOS}oublie pas\b", REMEMBER, 2),
    (r"\bgarde (?:ça|cela) en tête\b", REMEMBER, 2),
    (r"\bnote que\b", REMEMBER, 1),
    (rf"\bpour l{_APOS}avenir\b", REMEMBER, 1),
    (rf"\bj{_APOS}(?:aime|adore|préfère|déteste)\b", PREFERENCE, 1),
    (rf"\bje (?:préfère|déteste|n{_APOS}aime pas)\b", PREFERENCE, 1),
    (r"\b(?:mon|ma) \w+ préférée?\b", PREFERENCE, 1),
    (r"\bje suis fan de\b", PREFERENCE, 1),
    (r"\b(?:nous avons|on a) décidé\b", DECISION, 1),
    (rf"\bj{_APOS}ai décidé\b", DECISION, 1),
    (r"\bdésormais\b", DECISION, 1),
    (r"\bà partir de maintenant\b", DECISION, 1),
    (rf"\bje m{_APOS}appelle\b", IDENTITY, 2),
    (r"\bmon nom est\b", IDENTITY, 2),
    (r"\bappelle[- ]moi\b", IDENTITY, 1),
    (r"\bmon (?:téléphone|email|adresse)\b", IDENTITY, 1),
    (r"\bma date de naissance\b", IDENTITY, 1),
    (rf"\bj{_APOS}ai \d{{1,3}} ans\b", IDENTITY, 1),
    (r"\bje (?:travaille|vis|habite|étudie) (?:à|au|chez|pour|en|dans)\b", FACT, 1),
    (r"\bje suis (?:un|une) \w+\b", FACT, 1),
    (rf"\bj{_APOS}ai (?:un|une) \w+\b", FACT, 1),
    (r"\b(?:très )?importante?\b", IMPORTANCE, 1),
    (r"\btoujours\b", IMPORTANCE, 1),
    (r"\bjamais\b", IMPORTANCE, 1),
    (r"\bessentielle?\b", IMPORTANCE, 1),
]

_ES_RULES = [
    (r"\brecuerda\b", REMEMBER, 2),
    (r"\bno olvides\b", REMEMBER, 2),
    (r"\bten en cuenta\b", REMEMBER, 2),
    (r"\bapunta\b", REMEMBER, 1),
    (r"\bpara el futuro\b", REMEMBER, 1),
    (r"\b(?:no )?me (?:gusta|gustan|encanta|encantan)\b", PREFERENCE, 1),
    (r"\b(?:prefiero|odio)\b", PREFERENCE, 1),
    (r"\bmi \w+ favorit[oa]\b", PREFERENCE, 1),
    (r"\bsoy fan de\b", PREFERENCE, 1),
    (r"\b(?:hemos|he) decidido\b", DECISION, 1),
    (r"\bdecidimos\b", DECISION, 1),
    (r"\b(?:vamos a usar|usaremos)\b", DECISION, 1),
    (r"\b(?:a partir de ahora|de ahora en adelante)\b", DECISION, 1),
    (r"\bme llamo\b", IDENTITY, 2),
    (r"\bmi nombre es\b", IDENTITY, 2),
    (r"\bllámame\b", IDENTITY, 1),
    (r"\bmi (?:teléfono|correo|email|dirección|cumpleaños)\b", IDENTITY, 1),
    (r"\btengo \d{1,3} años\b", IDENTITY, 1),
    (r"\b(?:trabajo|vivo|estudio) (?:en|para)\b", FACT, 1),
    (r"\bsoy (?:un|una) \w+\b", FACT, 1),
    (r"\btengo (?:un|una) \w+\b", FACT, 1),
    (r"\bnací en\b", FACT, 1),
    (r"\bimportante\b", IMPORTANCE, 1),
    (r"\bsiempre\b", IMPORTANCE, 1),
    (r"\bnunca\b", IMPORTANCE, 1),
    (r"\bes esencial\b", IMPORTANCE, 1),
]

_IT_RULES = [
    (r"\bricorda(?:ti)?\b", REMEMBER, 2),
    (r"\bnon dimenticare\b", REMEMBER, 2),
    (r"\btieni (?:a mente|presente)\b", REMEMBER, 2),
    (r"\bprendi nota\b", REMEMBER, 1),
    (r"\bper il futuro\b", REMEMBER, 1),
    (r"\b(?:non )?mi (?:piace|piacciono)\b", PREFERENCE, 1),
    (r"\b(?:preferisco|adoro|odio)\b", PREFERENCE, 1),
    (r"\b(?:il mio|la mia) \w+ preferit[oa]\b", PREFERENCE, 1),
    (r"\b(?:abbiamo|ho) deciso\b", DECISION, 1),
    (r"\buseremo\b", DECISION, 1),
    (rf"\b(?:d{_APOS}ora|da ora) in poi\b", DECISION, 1),
    (r"\bmi chiamo\b", IDENTITY, 2),
    (r"\bil mio nome è", IDENTITY, 2),
    (r"\bchiamami\b", IDENTITY, 1),
    (r"\b(?:il mio|la mia) (?:telefono|email|indirizzo|compleanno)\b", IDENTITY, 1),
    (r"\bho \d{1,3} anni\b", IDENTITY, 1),
    (r"\b(?:lavoro|vivo|abito|studio) (?:a|in|per|presso)\b", FACT, 1),
    (r"\bsono (?:un|una|uno) \w+\b", FACT, 1),
    (r"\bho (?:un|una|uno) \w+\b", FACT, 1),
    (r"\bsono nat[oa] a\b", FACT, 1),
    (r"\bimportante\b", IMPORTANCE, 1),
    (r"\bsempre\b", IMPORTANCE, 1),
    (r"\b(?:mai più|non .{1,30}? mai)\b", IMPORTANCE, 1),
    (r"\bè essenziale\b", IMPORTANCE, 1),
]

_PT_RULES = [
    (r"\blembre-se\b", REMEMBER, 2),
    (r"\bnão (?:se )?esqueça\b", REMEMBER, 2),
    (r"\bmemoriza\b", REMEMBER, 2),
    (r"\btenha em mente\b", REMEMBER, 2),
    (r"\banota\b", REMEMBER, 1),
    (r"\bpara o futuro\b", REMEMBER, 1),
    (r"\beu (?:gosto|adoro|prefiro|odeio|amo)\b", PREFERENCE, 1),
    (r"\b(?:não )?gosto de\b", PREFERENCE, 1),
    (r"\b(?:meu|minha) \w+ favorit[oa]\b", PREFERENCE, 1),
    (r"\b(?:decidimos|decidi)\b", DECISION, 1),
    (r"\bvamos usar\b", DECISION, 1),
    (r"\b(?:a partir de agora|de agora em diante)\b", DECISION, 1),
    (r"\bmeu nome é", IDENTITY, 2),
    (r"\b(?:me chamo|chamo-me)\b", IDENTITY, 2),
    (r"\bme chame de\b", IDENTITY, 1),
    (r"\b(?:meu|minha) (?:telefone|e-?mail|endereço|aniversário)\b", IDENTITY, 1),
    (r"\btenho \d{1,3} anos\b", IDENTITY, 1),
    (r"\beu (?:trabalho|moro|vivo|estudo)\b", FACT, 1),
    (r"\bsou (?:um|uma) \w+\b", FACT, 1),
    (r"\btenho (?:um|uma) \w+\b", FACT, 1),
    (r"\bnasci em\b", FACT, 1),
    (r"\bimportante\b", IMPORTANCE, 1),
    (r"\bsempre\b", IMPORTANCE, 1),
    (r"\bnunca\b", IMPORTANCE, 1),
    (r"\bessencial\b", IMPORTANCE, 1),
]

_DE_RULES = [
    (r"\bmerke? dir\b", REMEMBER, 2),
    (r"\bmerken sie sich\b", REMEMBER, 2),
    (r"\bvergiss nicht\b", REMEMBER, 2),
    (r"\bdenk daran\b", REMEMBER, 2),
    (r"\bnotiere\b", REMEMBER, 1),
    (r"\bfür die zukunft\b", REMEMBER, 1),
    (r"\bich (?:mag|liebe|hasse|bevorzuge)\b", PREFERENCE, 1),
    (r"\bich \w+ gerne?\b", PREFERENCE, 1),
    (r"\bmeine? lieblings\w+\b", PREFERENCE, 1),
    (r"\bwir haben (?:uns )?(?:entschieden|beschlossen)\b", DECISION, 1),
    (r"\bich habe (?:mich )?(?:entschieden|beschlossen)\b", DECISION, 1),
    (r"\b(?:ab jetzt|ab sofort|von nun an)\b", DECISION, 1),
    (r"\bich hei(?:ß|ss)e\b", IDENTITY, 2),
    (r"\bmein name ist\b", IDENTITY, 2),
    (r"\bnenn mich\b", IDENTITY, 1),
    (r"\bmeine (?:telefonnummer|e-?mail|adresse)\b", IDENTITY, 1),
    (r"\bmein geburtstag\b", IDENTITY, 1),
    (r"\bich bin \d{1,3} jahre alt\b", IDENTITY, 1),
    (r"\bich (?:arbeite|wohne|lebe|studiere) (?:bei|in|als|für|an)\b", FACT, 1),
    (r"\bich bin (?:ein|eine) \w+\b", FACT, 1),
    (r"\bich habe (?:einen|eine|ein) \w+\b", FACT, 1),
    (r"\bich bin in \w+ geboren\b", FACT, 1),
    (r"\bwichtig\b", IMPORTANCE, 1),
    (r"\bimmer\b", IMPORTANCE, 1),
    (r"\bniemals\b", IMPORTANCE, 1),
    (r"\bauf jeden fall\b", IMPORTANCE, 1),
]

RULE_TABLES: dict[str, list[tuple[str, TriggerCategory, int]]] = {
    COMMON: _COMMON_RULES,
    "uk": _UK_RULES,
    "ru": _RU_RULES,
    "en": _EN_RULES,
    "by": _BY_RULES,
    "kk": _KK_RULES,
    "cz": _CZ_RULES,
    "fr": _FR_RULES,
    "es": _ES_RULES,
    "it": _IT_RULES,
    "pt": _PT_RULES,
    "de": _DE_RULES,
}


def build_catalog(
    tables: dict[str, list[tuple[str, TriggerCategory, int]]],
) -> tuple[TriggerRule, ...]:
    """Compile rule tables into TriggerRules, preserving declaration order."""
    return tuple(
        TriggerRule(pattern=pattern, category=category, language=language, weight=weight)
        for language, rules in tables.items()
        for pattern, category, weight in rules
    )


TRIGGERS: tuple[TriggerRule, ...] = build_catalog(RULE_TABLES)
