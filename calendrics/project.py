identity = 'calendrics'
name = 'calendrics'
abstract = 'Immutable dates and times with chronology dispatched fields.'
icon = '📅'
study = 'horology'

controller = 'calendrics'
contact = None

version_info = (0, 1, 0)
version = '.'.join(map(str, version_info))
