"""
Constantes globales pour ShowResolver.

Ce module contient les tables de configuration dont l'ORDRE fait partie
de la semantique :
- Extensions video reconnues
- Table des noms de scene (alias) prioritaire sur le nettoyage generique
- Mots-cles de prefixe ajoutes par certains groupes de release
- Series connues pour utiliser la notation par date de diffusion
"""

# Extensions video reconnues
VIDEO_EXTENSIONS = frozenset({
    ".mkv",
    ".mp4",
    ".avi",
    ".mov",
    ".wmv",
    ".m4v",
    ".mpg",
    ".mpeg",
    ".ts",
    ".divx",
})

# Noms de scene -> forme canonique.
# Une entree gagne sur le nettoyage generique, meme quand elle se mappe sur
# elle-meme ("The Simpsons" garderait sinon son article supprime).
SCENE_NAMES: tuple[tuple[str, str], ...] = (
    ("House, M.D.", "House"),
    ("Battlestar Galactica (2003)", "Battlestar Galactica"),
    ("Supernatural (2005)", "Supernatural"),
    ("The Universe", "The Universe"),
    ("The Simpsons", "The Simpsons"),
)

# Prefixes en majuscules retires en tete de nom de fichier
SCENE_KEYWORDS = ("AAF-", "MED-")

# Slugs des emissions dont les releases utilisent la date de diffusion
AIRDATE_NOTATION_SHOWS = frozenset({
    "dailyshow",
    "colbertreport",
    "tonightshowwithjayleno",
    "jayleno",
    "conan",
    "latelateshowwithcraigferguson",
    "craigferguson",
    "jimmykimmellive",
    "jimmykimmel",
    "realtimewithbillmaher",
    "latenightwithjimmyfallon",
    "jimmyfallon",
    "lateshowwithdavidletterman",
    "davidletterman",
    "sundayfootyshow",
    "sundayroast",
    "attackshow",
})

# Profondeur maximale de remontee dans les repertoires parents
MAX_PARENT_DEPTH = 5
