from datetime import datetime
import logging


class Log:
    """
    wrapper aroung the builtin logging to make it more readable
    """
    def __init__(self, level=logging.INFO):
        self.level = level

    def __call__(self, *pos, time_stamp=False, level=None, **kwargs):
        if level is None and self.level is None:
            return
        elif level is None:
            level = self.level

        stamp = datetime.now().strftime('[%Y-%m-%d %H:%M:%S]') if time_stamp else ' ' * 21
        message = '{} {}'.format(stamp, ' '.join([str(p) for p in pos]))
        logging.getLogger('ideogram').log(level, message, **kwargs)


LOG = Log()
DEVNULL = Log(level=None)


def cast_boolean(input_value):
    value = str(input_value).lower()
    if value in ['t', 'true', '1', 'y', 'yes', '+']:
        return True
    elif value in ['f', 'false', '0', 'n', 'no', '-']:
        return False
    raise TypeError('casting to boolean failed', input_value)
