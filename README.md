# wordtrainer

A small terminal vocabulary trainer. Each run works through one session:

1. Loads the active dictionary from `./data/words.json`.
2. Checks it. It must hold at least 10 entries, and every entry needs a non-empty word and meaning.
3. Offers to add new words or phrases. New entries start with progress 0 and today's date.
4. Runs a lesson of 10 distinct entries chosen at random. For each one it shows the meaning, and you type the word.
   An answer is correct when, with surrounding blanks removed, it matches the word exactly, case included.
5. Updates each asked entry. Its hit count goes up by one. A correct answer raises its progress by one. A wrong
   answer lowers it by one, but never below zero.
6. Appends every entry whose progress has reached 10 to `./data/archive` and removes it from the dictionary.
7. Saves the remaining entries back to `./data/words.json`.

## Installation

```
pip install .
```

## Usage

Run the command from the directory that holds `data/`:

```
wordtrainer
```

Options:

- `--vocabulary PATH`: the dictionary file (default `./data/words.json`)
- `--archive PATH`: the archive file (default `./data/archive`)

Answer yes/no questions with `y`, `yes`, `n` or `no`, in any case. Any other answer is refused, and the question is asked again.

If you enter an empty word while adding entries, the trainer asks whether you want to stop adding. If you answer yes, it stops adding and starts the lesson.

Progress messages go to standard output in ANSI colours. Log lines go to standard error. If anything stops the session,
the command prints `working flow error`, logs the reason and exits with status 1. Causes include a missing or malformed
dictionary, too few entries, an invalid entry and input that ends early. On success it exits with status 0.

## Dictionary format

The dictionary file holds a JSON array of entries:

```json
[
  {
    "word": "apple",
    "translation": "яблоко",
    "progress": 3,
    "start_date": "2024-01-15",
    "hits_count": 5
  }
]
```

- A missing or `null` field takes its empty default: an empty string, or 0.
- An empty `start_date` is set to today's date (`YYYY-MM-DD`).
- A `hits_count` of zero is set to the entry's `progress`.

The file is rewritten with two-space indentation at the end of each session.

## Archive format

The archive file gets one compact JSON object per line for each learned entry. The file is created if it does not exist.

```json
{"word":"apple","translation":"яблоко","start_date":"2024-01-15","hits_count":14,"archive_date":"2024-03-02"}
```

## Limitations

- The trainer does not create a dictionary. `data/words.json` must already exist and hold at least 10 valid entries.
- The directory for the archive must already exist.
- There is no command to list, edit or delete entries, and none to read the archive back.

## Library use

You can also drive a session from code:

```python
import io
import random

from wordtrainer.machine import StateMachine

StateMachine(
    vocabulary="data/words.json",
    archive="data/archive",
    reader=io.StringIO("n\n" + "answer\n" * 10),
    rng=random.Random(0),
    clock=lambda: "2024-01-01",
).run()
```

`StateMachine.run()` raises `wordtrainer.models.TrainerError` for any failure.

Other modules can be used on their own:

- `wordtrainer.storage`: `read_word_list`, `persist_result_to_file`, `append_to_archive`
- `wordtrainer.lesson`: `prepare_data_for_lesson`, `apply_lesson_results`, `find_dictionary_record`
- `wordtrainer.prompts`: `normalize_yes_no`, `ask_yes_no`, `ask_word`

## Development

```
pip install -e ".[test]"
pytest
```