# strings.py
"""Contains global strings"""


# --- Error messages ---
MSG_ERROR = 'Whoops, something went wrong here.'
MSG_ONLY_OWNER = 'Only the owner is allowed to change this.'
MSG_AVAILABLE_PARSERS = 'Available parsers are `classicdb` and `itemization`.'
MSG_PARSER_UPDATE_ERROR = 'An error occurred while updating parser.'
MSG_GUILD_ONLY = 'This command can only be used in a server.'
MSG_INVALID_ID = '`{id}` is not a valid id.'
MSG_NO_ICON_FOUND = 'No icon found for {type} `{id}`.'

# --- Internal error messages ---
INTERNAL_ERROR_SQLITE3 = 'Error executing SQL.\nError: {error}\nTable: {table}\nFunction: {function}\nSQL: {sql}'
INTERNAL_ERROR_DICT_TO_OBJECT = 'Error converting record into object\nFunction: {function}\nRecord: {record}\n'


# --- Command answers ---
MSG_PARSER_UPDATED = 'Updated parser to `{parser}`.'
MSG_UNRECOGNIZED_COMMAND = '*Unrecognized command* `{command}`\n\n{help}'

HELP_TEXT = (
    '**Available commands:**```css\n'
    'help:                                - Displays this text.\n'
    'set_parser: <classicdb|itemization> - Changes the parser of the bot.'
    '```'
)


# --- Scraping ---
ICON_MARKER = 'Icon.create'
ICON_URL = '{host}/images/icons/large/{icon_name}.jpg'
THUMBNAIL_PAGE_URL = '{host}/?{type}={id}'


# --- Channel identities ---
CHANNEL_PRIVATE_DM = 'Private DM for user {author}'
CHANNEL_GROUP_DM = 'Group DM'
