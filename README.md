# wcparser

Turn WhatsApp chat exports (the `.txt` files produced by "Export chat") into
structured Python objects. The package uses only the standard library.

The parser reads each message's date, time, author and text. It handles the
many date and time layouts that different locales produce:

- day-first or month-first dates, with `/`, `-` or `.` separators;
- two-digit years, which are taken to be in 2000–2099;
- 12-hour clocks (`1:55 PM`, `1:55 p.m.`, `1:55\u202fPM`) and 24-hour clocks;
- bracketed timestamps such as `[23/10/21, 18:44:02]`;
- invisible left-to-right and right-to-left marks, which are also removed
  from the message text.

A line without a timestamp is joined onto the message before it, with a
newline in between. A line with a timestamp but no `author:` part becomes a
system message, and its `author` is `None`. Lines that come before the first
message are dropped.

## Installation

```
pip install wcparser
```

## Usage

```python
from wcparser.api import parse_string, parse_file
from wcparser.models import ParseOptions

messages = parse_string(
    "06/03/2017, 00:45 - Sample User: This is a test message\n"
    "08/05/2017, 01:48 - TestBot: Hey I'm a test too!"
)
for message in messages:
    print(message.date, message.author, message.message)

messages = parse_file("chat.txt", ParseOptions(parse_attachments=True))
```

`parse_file` reads the file as UTF-8. It raises `OSError` if the file cannot
be read and `UnicodeDecodeError` if the file is not valid UTF-8. A date or time
that is out of range, such as month 13, raises `ValueError`.

Each `wcparser.models.Message` has these fields:

- `date`: a timezone-aware `datetime` in UTC.
- `author`: the sender's name, or `None` for a system message.
- `message`: the text of the message, with surrounding whitespace removed.
- `attachment`: an `Attachment` with a `file_name`, or `None`.

`wcparser.models.ParseOptions` takes these settings:

- `days_first`: `True` if dates start with the day, `False` if they start with
  the month. Leave it as `None` to have the order worked out from all the dates
  in the export. The parser first looks for numbers above 12, then for values
  that go down within one year, then for the number that changes more often.
  If none of these settles the order, the day is taken to come first.
- `parse_attachments`: recognise attachment notices such as
  `IMG-20210428-WA0001.jpg (file attached)` and
  `<attached: 00000042-PHOTO-2020-06-07-15-13-20.jpg>`. The file name is stored
  in `Message.attachment`. When this is off, `attachment` is always `None`.
- `debug`: print details of each parsing step to standard output.

### Lower-level pieces

- `wcparser.lines.make_array_of_messages(lines, debug=False)` groups raw lines
  into `RawMessage` objects, each with a `system` flag and its `msg` text.
- `wcparser.parser.parse_messages(messages, options=None)` turns `RawMessage`
  objects into `Message` objects. It raises `ValueError` for a message that
  does not begin with a date and time.
- `wcparser.parser.parse_message_attachment(message)` returns the
  `Attachment` named in a message's text, or `None`.
- `wcparser.dates` holds the date and time helpers. Among them are
  `days_before_months`, `normalize_date`, `normalize_time`,
  `convert_time_12_to_24` and `normalize_ampm`.

## Command line

To count messages per author, most active first:

```
wcparser chat.txt
```

The output starts with the line `Users by message count:`, followed by one
`author: count` line per author. System messages are not counted. If the file
cannot be read, the command prints an error and exits with status 1.