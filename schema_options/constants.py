"""Schema keywords and overlay directive names read by the options resolver."""

ANY_OF_KEY = 'anyOf'
ONE_OF_KEY = 'oneOf'
ENUM_KEY = 'enum'
CONST_KEY = 'const'
DEFAULT_KEY = 'default'
TITLE_KEY = 'title'
PROPERTIES_KEY = 'properties'
ITEMS_KEY = 'items'
DISCRIMINATOR_KEY = 'discriminator'
PROPERTY_NAME_KEY = 'propertyName'

UI_PREFIX = 'ui:'
UI_OPTIONS_KEY = 'ui:options'

# Marker inside an enumOrder directive standing for "every option not listed".
ORDER_WILDCARD = '*'

ROOT_PATH = '(root)'
