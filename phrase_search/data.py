"""
Static learning dataset and dataset loading.

The built-in dataset covers everyday Norwegian words and phrases for
Russian speakers. A JSON file with the same top-level keys (vocabulary,
grammar, categories, levels, translations, records) can replace it.
"""

import json
import logging
from pathlib import Path
from typing import Any, List, Mapping, Union

from .models import Dataset, GrammarRule, Record, VocabularyEntry
from .vocabulary import entry_to_record

logger = logging.getLogger(__name__)

VOCABULARY = [
    {
        "id": 1, "norwegian": "hei", "russian": "привет",
        "category": "greetings", "level": "beginner", "type": "word", "pronunciation": "хай",
        "examples": [{"no": "Hei! Hvordan har du det?", "ru": "Привет! Как дела?"}],
    },
    {
        "id": 2, "norwegian": "takk", "russian": "спасибо",
        "category": "greetings", "level": "beginner", "type": "word", "pronunciation": "так",
        "examples": [{"no": "Takk for hjelpen!", "ru": "Спасибо за помощь!"}],
    },
    {
        "id": 3, "norwegian": "god morgen", "russian": "доброе утро",
        "category": "greetings", "level": "beginner", "type": "phrase", "pronunciation": "гу морген",
        "examples": [{"no": "God morgen! Har du sovet godt?", "ru": "Доброе утро! Хорошо спал?"}],
    },
    {
        "id": 4, "norwegian": "beklager", "russian": "извините",
        "category": "greetings", "level": "beginner", "type": "word", "pronunciation": "беклагер",
        "examples": [{"no": "Beklager, jeg forstår ikke.", "ru": "Извините, я не понимаю."}],
    },
    {
        "id": 5, "norwegian": "hvor mye koster det?", "russian": "сколько это стоит?",
        "category": "shopping", "level": "beginner", "type": "phrase", "pronunciation": "вор мюе костер де",
        "examples": [{"no": "Unnskyld, hvor mye koster dette?", "ru": "Извините, сколько это стоит?"}],
    },
    {
        "id": 6, "norwegian": "jeg forstår ikke", "russian": "я не понимаю",
        "category": "communication", "level": "beginner", "type": "phrase", "pronunciation": "яй форшор икке",
        "examples": [{"no": "Beklager, jeg forstår ikke norsk så godt.",
                      "ru": "Извините, я не очень хорошо понимаю норвежский."}],
    },
    {
        "id": 7, "norwegian": "kan du hjelpe meg?", "russian": "можете ли вы мне помочь?",
        "category": "communication", "level": "beginner", "type": "phrase", "pronunciation": "кан ду ельпе май",
        "examples": [{"no": "Unnskyld, kan du hjelpe meg med veien?",
                      "ru": "Извините, можете помочь мне с дорогой?"}],
    },
    {
        "id": 8, "norwegian": "jeg kommer fra Russland", "russian": "я из России",
        "category": "personal_info", "level": "beginner", "type": "phrase", "pronunciation": "яй коммер фра руссланн",
        "examples": [{"no": "Hei, jeg kommer fra Russland.", "ru": "Привет, я из России."}],
    },
    {
        "id": 9, "norwegian": "jeg vil gjerne ha kaffe", "russian": "я хочу кофе",
        "category": "food", "level": "beginner", "type": "phrase", "pronunciation": "яй виль йэрне ха кафе",
        "examples": [{"no": "Jeg vil gjerne ha en kopp kaffe, takk.", "ru": "Я бы хотел чашку кофе, пожалуйста."}],
    },
    {
        "id": 10, "norwegian": "hvor er bussen?", "russian": "где автобус?",
        "category": "transport", "level": "beginner", "type": "phrase", "pronunciation": "вор эр бусен",
        "examples": [{"no": "Unnskyld, hvor er bussen til sentrum?", "ru": "Извините, где автобус в центр?"}],
    },
    {
        "id": 11, "norwegian": "hva er klokka?", "russian": "который час?",
        "category": "time", "level": "intermediate", "type": "phrase", "pronunciation": "ва эр клока",
        "examples": [{"no": "Unnskyld, hva er klokka nå?", "ru": "Извините, который сейчас час?"}],
    },
    {
        "id": 12, "norwegian": "det regner", "russian": "идет дождь",
        "category": "weather", "level": "intermediate", "type": "phrase", "pronunciation": "дэ рэгнер",
        "examples": [{"no": "Ta med paraply, det regner i dag.", "ru": "Возьми зонт, сегодня идет дождь."}],
    },
]

GRAMMAR = [
    {
        "id": 1, "topic": "артикли",
        "norwegian_rule": "en/et + noun, den/det + adjective + noun",
        "russian_explanation": "В норвежском есть два неопределенных артикля: "
                               "'en' (мужской/женский род) и 'et' (средний род)",
        "examples": [
            {"no": "en bil (машина)", "ru": "неопределенный артикль мужского рода"},
            {"no": "et hus (дом)", "ru": "неопределенный артикль среднего рода"},
            {"no": "den røde bilen (красная машина)", "ru": "определенный артикль + прилагательное"},
        ],
        "level": "beginner",
    },
    {
        "id": 2, "topic": "множественное число",
        "norwegian_rule": "добавление -er, -e, или изменение корня",
        "russian_explanation": "Множественное число в норвежском образуется несколькими способами",
        "examples": [
            {"no": "bil → biler (машина → машины)", "ru": "добавление -er"},
            {"no": "hus → hus (дом → дома)", "ru": "без изменений"},
            {"no": "mann → menn (мужчина → мужчины)", "ru": "изменение корня"},
        ],
        "level": "beginner",
    },
]

CATEGORIES = {
    "greetings": "приветствие",
    "shopping": "покупки",
    "communication": "общение",
    "personal_info": "личная информация",
    "food": "еда",
    "transport": "транспорт",
    "time": "время",
    "weather": "погода",
}

LEVELS = {
    "beginner": "начинающий",
    "intermediate": "средний",
    "advanced": "продвинутый",
}

TRANSLATIONS = {
    # Приветствия и вежливость
    "привет": "hei [хай]",
    "здравствуй": "hei [хай]",
    "здравствуйте": "hei [хай]",
    "доброе утро": "god morgen [гу морген]",
    "добрый день": "god dag [гу да]",
    "добрый вечер": "god kveld [гу квель]",
    "пока": "ha det [ха дэ]",
    "до свидания": "ha det [ха дэ]",
    "увидимся": "vi sees [ви сэс]",
    "спасибо": "takk [так]",
    "большое спасибо": "tusen takk [тусен так]",
    "пожалуйста": "værsnil [вэршниль]",
    "извините": "unnskyld [унщюль]",
    "простите": "beklager [беклагер]",
    # Знакомство
    "меня зовут": "jeg heter [яй хэтер]",
    "как тебя зовут": "hva heter du [ва хэтер ду]",
    "как вас зовут": "hva heter du [ва хэтер ду]",
    "приятно познакомиться": "hyggelig å møte deg [хюгели о мёте дай]",
    "откуда ты": "hvor kommer du fra [вор коммер ду фра]",
    "я из россии": "jeg kommer fra russland [яй коммер фра руслан]",
    "я из москвы": "jeg kommer fra moskva [яй коммер фра москва]",
    # Основные фразы
    "да": "ja [я]",
    "нет": "nei [най]",
    "не знаю": "jeg vet ikke [яй вэ ике]",
    "понимаю": "jeg forstår [яй форшор]",
    "не понимаю": "jeg forstår ikke [яй форшор ике]",
    "говорите медленнее": "snakk saktere [снак сактере]",
    "повторите пожалуйста": "kan du gjenta det [кан ду йента дэ]",
    "помогите": "hjelp [ельп]",
    "я не говорю по-норвежски": "jeg snakker ikke norsk [яй снакер ике ношк]",
    "говорите по-английски": "snakker du engelsk [снакер ду энгельск]",
    # Чувства и состояния
    "как дела": "hvordan har du det [ворден хар ду дэ]",
    "хорошо": "bra [бра]",
    "плохо": "dårlig [дорли]",
    "отлично": "utmerket [утмеркет]",
    "устал": "jeg er trøtt [яй эр трёт]",
    "голоден": "jeg er sulten [яй эр султен]",
    "хочу пить": "jeg er tørst [яй эр тёшт]",
    "мне холодно": "jeg fryser [яй фрюсер]",
    "мне жарко": "jeg er varm [яй эр варм]",
    # Время
    "сколько времени": "hvor mye er klokka [вор мюе эр клока]",
    "который час": "hva er tida [ва эр тида]",
    "сегодня": "i dag [и да]",
    "вчера": "i går [и гор]",
    "завтра": "i morgen [и морген]",
    "сейчас": "nå [но]",
    "позже": "senere [сэнере]",
    "утром": "om morgenen [ом моргенен]",
    "днем": "om dagen [ом дагенен]",
    "вечером": "om kvelden [ом квелден]",
    "ночью": "om natta [ом ната]",
    # Еда и напитки
    "я хочу есть": "jeg vil gjerne spise [яй виль йэрне списе]",
    "я хочу пить": "jeg vil gjerne drikke [яй виль йэрне дрике]",
    "я хочу кофе": "jeg vil gjerne ha kaffe [яй виль йэрне ха кафе]",
    "я хочу чай": "jeg vil gjerne ha te [яй виль йэрне ха тэ]",
    "я хочу воду": "jeg vil gjerne ha vann [яй виль йэрне ха ван]",
    "счет пожалуйста": "regningen takk [рэгнинген так]",
    "это вкусно": "det er deilig [дэ эр дайли]",
    "мне не нравится": "jeg liker det ikke [яй ликер дэ ике]",
    # Покупки
    "сколько это стоит": "hvor mye koster det [вор мюе костер дэ]",
    "это дорого": "det er dyrt [дэ эр дюрт]",
    "это дешево": "det er billig [дэ эр билли]",
    "я хочу купить": "jeg vil gjerne kjøpe [яй виль йэрне шёпе]",
    "где касса": "hvor er kassa [вор эр каса]",
    "можно карточкой": "kan jeg betale med kort [кан яй бетале мэ корт]",
    # Направления
    "где": "hvor [вор]",
    "как добраться": "hvordan kommer jeg dit [ворден коммер яй дит]",
    "направо": "til høyre [тиль хёйре]",
    "налево": "til venstre [тиль венстре]",
    "прямо": "rett frem [рет фрем]",
    "рядом": "i nærheten [и нэрхетен]",
    "далеко": "langt unna [лант уна]",
    "близко": "nært [нэрт]",
    # Транспорт
    "где автобус": "hvor er bussen [вор эр бусен]",
    "где метро": "hvor er t-banen [вор эр тэ-банен]",
    "где такси": "hvor er drosjen [вор эр дрошен]",
    "сколько стоит билет": "hvor mye koster billetten [вор мюе костер билетен]",
    "когда отправляется": "når går det [нор гор дэ]",
    # Гостиница
    "у вас есть свободные номера": "har dere ledige rom [хар дэре ледие ром]",
    "я забронировал номер": "jeg har bestilt rom [яй хар бестильт ром]",
    "где мой номер": "hvor er rommet mitt [вор эр ромет мит]",
    "можно ключ": "kan jeg få nøkkelen [кан яй фо нёкелен]",
    # Экстренные ситуации
    "вызовите врача": "ring til legen [ринг тиль лэген]",
    "вызовите полицию": "ring til politiet [ринг тиль политиет]",
    "я потерялся": "jeg har gått meg vill [яй хар гот мэй виль]",
    "где больница": "hvor er sykehuset [вор эр сюкехусет]",
    "где аптека": "hvor er apoteket [вор эр апотэкет]",
    # Семья
    "моя семья": "min familie [мин фамилье]",
    "мой муж": "min mann [мин ман]",
    "моя жена": "min kone [мин коне]",
    "мой сын": "min sønn [мин сён]",
    "моя дочь": "min datter [мин датер]",
    "мои родители": "mine foreldre [мине форэльдре]",
    "моя мама": "min mor [мин мор]",
    "мой папа": "min far [мин фар]",
    # Работа
    "где ты работаешь": "hvor jobber du [вор йобер ду]",
    "я работаю в": "jeg jobber i [яй йобер и]",
    "я учитель": "jeg er lærer [яй эр лэрер]",
    "я врач": "jeg er lege [яй эр лэге]",
    "я студент": "jeg er student [яй эр студент]",
    # Хобби и интересы
    "что ты любишь делать": "hva liker du å gjøre [ва ликер ду о йёре]",
    "я люблю читать": "jeg liker å lese [яй ликер о лэзе]",
    "я люблю музыку": "jeg liker musikk [яй ликер мусик]",
    "я люблю спорт": "jeg liker sport [яй ликер спорт]",
    "я люблю путешествовать": "jeg liker å reise [яй ликер о райзе]",
    # Погода
    "какая погода": "hvordan er været [ворден эр вэрет]",
    "хорошая погода": "fint vær [финт вэр]",
    "плохая погода": "dårlig vær [дорли вэр]",
    "идет дождь": "det regner [дэ рэгнер]",
    "идет снег": "det snør [дэ снёр]",
    "солнечно": "det er sol [дэ эр соль]",
    "холодно": "det er kaldt [дэ эр кальт]",
    "тепло": "det er varmt [дэ эр вармт]",
}


def parse_dataset(raw: Mapping[str, Any]) -> Dataset:
    """
    Build a Dataset from its JSON-compatible form.

    Args:
        raw: Mapping with any of the keys vocabulary, grammar, categories,
            levels, translations and records.

    Returns:
        The parsed dataset. Records without an id are dropped here.
    """
    records = []
    for item in raw.get("records", []):
        record = Record.from_mapping(item)
        if record is not None:
            records.append(record)

    return Dataset(
        vocabulary=[VocabularyEntry.from_mapping(v) for v in raw.get("vocabulary", [])],
        grammar=[GrammarRule.from_mapping(g) for g in raw.get("grammar", [])],
        categories=dict(raw.get("categories", {})),
        levels=dict(raw.get("levels", {})),
        translations={k.lower().strip(): v for k, v in raw.get("translations", {}).items()},
        records=records,
    )


def default_dataset() -> Dataset:
    """Return the built-in dataset."""
    return parse_dataset({
        "vocabulary": VOCABULARY,
        "grammar": GRAMMAR,
        "categories": CATEGORIES,
        "levels": LEVELS,
        "translations": TRANSLATIONS,
    })


def load_dataset(path: Union[str, Path, None] = None) -> Dataset:
    """
    Load a dataset from a JSON file, or the built-in one.

    Args:
        path: Path to a UTF-8 JSON file. If None, returns the built-in dataset.

    Returns:
        The loaded dataset.

    Raises:
        OSError: If the file cannot be read.
        json.JSONDecodeError: If the file is not valid JSON.
    """
    if path is None:
        return default_dataset()

    with open(path, "r", encoding="utf-8") as f:
        raw = json.load(f)
    dataset = parse_dataset(raw)
    logger.info(
        "Loaded dataset %s: %d vocabulary entries, %d records, %d translations",
        path, len(dataset.vocabulary), len(dataset.records), len(dataset.translations),
    )
    return dataset


def build_records(dataset: Dataset) -> List[Record]:
    """
    Flatten a dataset into the records the search engine indexes.

    Plain records come first, followed by one record per vocabulary entry.

    Args:
        dataset: The loaded dataset.

    Returns:
        List of records.
    """
    records = list(dataset.records)
    records.extend(
        entry_to_record(entry, dataset.categories, dataset.levels)
        for entry in dataset.vocabulary
    )
    return records
