"""Canonical mood taxonomy.

Each mood maps to a description used in prompts, TMDb genre ids for the
discover fallback, and a handful of keywords surfaced next to the result.
The table covers both the emotional moods (``happy``, ``scared``...) and the
genre-style moods the UI shows (``horror``, ``scifi``...).
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping


# TMDb movie genre ids
ACTION = 28
ADVENTURE = 12
ANIMATION = 16
COMEDY = 35
CRIME = 80
DOCUMENTARY = 99
DRAMA = 18
FAMILY = 10751
FANTASY = 14
HISTORY = 36
HORROR = 27
MUSIC = 10402
MYSTERY = 9648
ROMANCE = 10749
SCIENCE_FICTION = 878
THRILLER = 53
WAR = 10752
WESTERN = 37

# Drama + Comedy when a mood has no genres of its own.
DEFAULT_FALLBACK_GENRE_IDS: tuple[int, ...] = (DRAMA, COMEDY)


@dataclass(frozen=True, slots=True)
class MoodProfile:
    key: str
    description: str
    genre_ids: tuple[int, ...] = ()
    genre_examples: str = "various genres"
    example_titles: str = "various movies"
    keywords: tuple[str, ...] = ()

    @property
    def is_default(self) -> bool:
        return self.key not in MOOD_PROFILES

    def fallback_genre_ids(self) -> tuple[int, ...]:
        return self.genre_ids or DEFAULT_FALLBACK_GENRE_IDS


def _profile(key: str, description: str, genre_ids, genre_examples, example_titles, keywords):
    return MoodProfile(
        key=key,
        description=description,
        genre_ids=tuple(genre_ids),
        genre_examples=genre_examples,
        example_titles=example_titles,
        keywords=tuple(keywords),
    )


_PROFILES = [
    # Emotional moods
    _profile(
        "happy",
        "joyful, uplifting, and light-hearted movies that leave viewers feeling good",
        [COMEDY],
        "Comedy, Family, Animation, Musical",
        "The Lego Movie, Singin' in the Rain, Toy Story, School of Rock",
        ["uplifting", "cheerful", "joyful", "funny", "light-hearted"],
    ),
    _profile(
        "sad",
        "emotionally moving, melancholic films that may evoke tears or deep emotions",
        [DRAMA],
        "Drama, Romance (with tragic elements), War",
        "The Shawshank Redemption, Schindler's List, Life is Beautiful",
        ["emotional", "moving", "tragic", "somber", "poignant"],
    ),
    _profile(
        "excited",
        "thrilling, high-energy, and adrenaline-pumping films with intense action",
        [ACTION],
        "Action, Adventure, Sci-Fi, Superhero",
        "Mad Max: Fury Road, Die Hard, Mission Impossible series",
        ["thrilling", "high-energy", "adrenaline-pumping", "intense", "action-packed"],
    ),
    _profile(
        "relaxed",
        "calm, peaceful films with beautiful scenery or gentle storytelling",
        [ADVENTURE],
        "Documentary, Nature, Gentle Comedy, Slice-of-Life",
        "The Secret Life of Walter Mitty, Chef, Lost in Translation",
        ["calm", "peaceful", "laid-back", "soothing", "gentle"],
    ),
    _profile(
        "romantic",
        "heartfelt love stories with emotional relationships at their center",
        [ROMANCE],
        "Romance, Romantic Comedy, Drama with love stories",
        "The Notebook, Before Sunrise, When Harry Met Sally",
        ["love", "passionate", "heartwarming", "emotional", "intimate"],
    ),
    _profile(
        "scared",
        "frightening, tense horror or thriller films designed to create fear",
        [HORROR],
        "Horror, Supernatural, Psychological Thriller",
        "The Shining, Get Out, A Quiet Place, Hereditary",
        ["frightening", "terrifying", "chilling", "creepy", "unsettling"],
    ),
    _profile(
        "thoughtful",
        "philosophical, intellectually stimulating films that make viewers think",
        [SCIENCE_FICTION, DRAMA],
        "Drama, Sci-Fi with philosophical themes, Arthouse",
        "Inception, Arrival, The Matrix, Eternal Sunshine of the Spotless Mind",
        ["profound", "philosophical", "thought-provoking", "deep", "intelligent"],
    ),
    _profile(
        "mysterious",
        "enigmatic films with puzzles, secrets, or detective elements",
        [MYSTERY],
        "Mystery, Thriller, Crime, Detective",
        "Knives Out, Gone Girl, Memento, The Prestige",
        ["enigmatic", "puzzling", "suspenseful", "intriguing", "twisty"],
    ),
    _profile(
        "adventurous",
        "journey-filled movies with exploration, discovery, and action",
        [ADVENTURE],
        "Adventure, Action, Fantasy, Expedition films",
        "Indiana Jones series, The Lord of the Rings, Pirates of the Caribbean",
        ["epic", "journey", "exploration", "quest", "discovery"],
    ),
    _profile(
        "nostalgic",
        "films that evoke memories of the past or have a timeless quality",
        [HISTORY],
        "Period Dramas, Coming-of-Age, Classic films",
        "The Sandlot, Stand By Me, Back to the Future",
        ["classic", "reminiscent", "memorable", "timeless", "retro"],
    ),
    _profile(
        "inspired",
        "motivational stories often based on real achievements or overcoming obstacles",
        [DOCUMENTARY, DRAMA],
        "Biographical, Sports, Underdog stories",
        "The Pursuit of Happyness, Rocky, Hidden Figures",
        ["motivational", "encouraging", "true story", "uplifting", "triumphant"],
    ),
    _profile(
        "tense",
        "suspenseful films that keep viewers on the edge of their seats",
        [THRILLER],
        "Thriller, Crime, Psychological Suspense",
        "No Country for Old Men, Sicario, Prisoners",
        ["suspenseful", "edge-of-seat", "gripping", "nail-biting", "riveting"],
    ),
    _profile(
        "funny",
        "comedies focused on humor and laughter with jokes and amusing situations",
        [COMEDY],
        "Comedy, Slapstick, Satire, Rom-Com",
        "Superbad, Bridesmaids, The Hangover, Shaun of the Dead",
        ["hilarious", "laugh-out-loud", "comedic", "witty", "amusing"],
    ),
    _profile(
        "epic",
        "grand, sweeping tales with large-scale stories, often in fantasy or historical settings",
        [FANTASY, ADVENTURE],
        "Fantasy, Historical Epic, War, Mythology-based",
        "Gladiator, Braveheart, The Lord of the Rings",
        ["grand", "sweeping", "monumental", "majestic", "vast"],
    ),
    _profile(
        "heartwarming",
        "emotionally satisfying films with positive messages about humanity",
        [FAMILY, DRAMA],
        "Family, Inspirational Drama, Feel-good films",
        "Forrest Gump, The Intouchables, CODA",
        ["touching", "feel-good", "emotional", "uplifting", "sweet"],
    ),
    # Genre moods
    _profile(
        "action",
        "high-energy, thrilling films with exciting confrontations and dynamic sequences that deliver an adrenaline rush",
        [ACTION],
        "Action, Martial Arts, Heist, Spy",
        "Mad Max: Fury Road, John Wick, The Raid, Heat",
        ["explosive", "adrenaline-fueled", "fast-paced", "intense", "action-packed"],
    ),
    _profile(
        "comedy",
        "humorous, witty, and amusing films with laugh-out-loud moments that create a lighthearted mood",
        [COMEDY],
        "Comedy, Satire, Parody, Rom-Com",
        "Superbad, Groundhog Day, The Grand Budapest Hotel, Hot Fuzz",
        ["hilarious", "witty", "lighthearted", "quirky", "amusing"],
    ),
    _profile(
        "drama",
        "emotionally resonant, powerful films with complex character development and meaningful human experiences",
        [DRAMA],
        "Drama, Character Study, Family Drama",
        "The Shawshank Redemption, Moonlight, Manchester by the Sea",
        ["powerful", "moving", "character-driven", "resonant", "heartfelt"],
    ),
    _profile(
        "horror",
        "frightening, tense films with suspense and scares that create feelings of dread and unease",
        [HORROR],
        "Horror, Supernatural, Slasher, Psychological Horror",
        "The Shining, Get Out, Hereditary, The Conjuring",
        ["frightening", "terrifying", "chilling", "creepy", "unsettling"],
    ),
    _profile(
        "adventure",
        "exciting journey-filled experiences with exploration, discovery, and scenarios that inspire wonder",
        [ADVENTURE],
        "Adventure, Expedition, Treasure Hunt, Survival",
        "Raiders of the Lost Ark, Jurassic Park, The Goonies",
        ["epic", "journey", "exploration", "quest", "discovery"],
    ),
    _profile(
        "thriller",
        "suspenseful, intense films with high-stakes situations that create nail-biting anticipation",
        [THRILLER],
        "Thriller, Psychological Thriller, Crime Thriller",
        "Se7en, Gone Girl, Zodiac, Prisoners",
        ["suspenseful", "gripping", "nail-biting", "tense", "edge-of-seat"],
    ),
    _profile(
        "romance",
        "emotionally touching love stories with meaningful relationships and heartfelt connections",
        [ROMANCE],
        "Romance, Romantic Comedy, Romantic Drama",
        "Before Sunrise, Pride & Prejudice, La La Land",
        ["love", "passionate", "tender", "heartfelt", "intimate"],
    ),
    _profile(
        "animation",
        "visually creative and imaginative films with expressive characters and artistic visual storytelling",
        [ANIMATION],
        "Animation, Family, Anime, Stop-Motion",
        "Spirited Away, Toy Story, Spider-Man: Into the Spider-Verse",
        ["imaginative", "colorful", "whimsical", "charming", "inventive"],
    ),
    _profile(
        "fantasy",
        "magical, enchanting films with fantastical elements that transport viewers to imaginative worlds",
        [FANTASY],
        "Fantasy, Sword and Sorcery, Fairy Tale",
        "The Lord of the Rings, Pan's Labyrinth, Harry Potter series",
        ["magical", "enchanting", "otherworldly", "mythical", "wondrous"],
    ),
    _profile(
        "scifi",
        "futuristic, speculative films with technological concepts and innovative ideas that expand the mind",
        [SCIENCE_FICTION],
        "Science Fiction, Space Opera, Cyberpunk, Dystopia",
        "Blade Runner, Interstellar, Arrival, Ex Machina",
        ["futuristic", "mind-bending", "speculative", "visionary", "cosmic"],
    ),
    _profile(
        "historical",
        "period-authentic films with attention to historical detail and context from significant eras",
        [HISTORY],
        "Historical Drama, Biopic, Period Piece",
        "Lincoln, The King's Speech, 12 Years a Slave",
        ["period", "authentic", "sweeping", "timeless", "grand"],
    ),
    _profile(
        "mystery",
        "enigmatic, puzzling films with intriguing questions that engage viewers in solving the central puzzle",
        [MYSTERY],
        "Mystery, Whodunit, Detective, Neo-Noir",
        "Knives Out, Memento, Chinatown, The Prestige",
        ["enigmatic", "puzzling", "intriguing", "twisty", "clever"],
    ),
    _profile(
        "musical",
        "rhythmic, melodic films with songs and choreography that express emotions through music",
        [MUSIC],
        "Musical, Music Biopic, Dance",
        "Singin' in the Rain, La La Land, Whiplash",
        ["melodic", "rhythmic", "toe-tapping", "joyful", "showstopping"],
    ),
    _profile(
        "documentary",
        "informative, educational films with factual information presented in a revealing and insightful way",
        [DOCUMENTARY],
        "Documentary, Nature Documentary, True Crime",
        "Free Solo, Planet Earth, Searching for Sugar Man",
        ["insightful", "revealing", "true story", "educational", "eye-opening"],
    ),
    _profile(
        "crime",
        "gritty, investigative films featuring criminal activities and moral complexities within the justice system",
        [CRIME],
        "Crime, Gangster, Heist, Police Procedural",
        "The Godfather, Goodfellas, Heat, The Departed",
        ["gritty", "investigative", "morally complex", "dark", "gripping"],
    ),
    _profile(
        "western",
        "frontier-focused films with rugged landscapes and themes of law and lawlessness in the Old West",
        [WESTERN],
        "Western, Revisionist Western, Neo-Western",
        "The Good, the Bad and the Ugly, Unforgiven, True Grit",
        ["rugged", "frontier", "dusty", "lawless", "stoic"],
    ),
    _profile(
        "superhero",
        "heroic films with extraordinary characters and powers that showcase courage in epic circumstances",
        [ACTION, SCIENCE_FICTION],
        "Superhero, Comic Book, Action, Sci-Fi",
        "The Dark Knight, Spider-Man 2, Logan, The Avengers",
        ["heroic", "larger-than-life", "epic", "action-packed", "iconic"],
    ),
    _profile(
        "war",
        "battlefield-focused films with combat sequences and strategic elements that depict military conflict",
        [WAR],
        "War, Military Drama, Historical Epic",
        "Saving Private Ryan, 1917, Apocalypse Now, Dunkirk",
        ["harrowing", "intense", "sobering", "heroic", "visceral"],
    ),
    _profile(
        "foreign",
        "international films with cultural elements and perspectives from non-English speaking countries",
        [DRAMA],
        "World Cinema, Foreign Language Drama, Art House",
        "Parasite, Amélie, City of God, Spirited Away",
        ["international", "cultural", "subtitled", "distinctive", "eye-opening"],
    ),
    _profile(
        "indie",
        "unique, artistic films with a personal creative vision that often breaks from conventional filmmaking",
        [DRAMA],
        "Independent, Art House, Mumblecore, Coming-of-Age",
        "Lady Bird, Little Miss Sunshine, Eighth Grade, Moon",
        ["quirky", "artistic", "offbeat", "personal", "understated"],
    ),
]

MOOD_PROFILES: Mapping[str, MoodProfile] = MappingProxyType({profile.key: profile for profile in _PROFILES})


def normalize_mood(mood: str) -> str:
    return mood.strip().lower()


def lookup(mood: str) -> MoodProfile:
    """Resolve ``mood`` to a profile, falling back to a generic one for unknown moods."""

    key = normalize_mood(mood)
    profile = MOOD_PROFILES.get(key)
    if profile is not None:
        return profile
    return MoodProfile(
        key=key,
        description=f"movies that would make someone feel {key}",
    )


def available_moods() -> list[str]:
    return list(MOOD_PROFILES)
