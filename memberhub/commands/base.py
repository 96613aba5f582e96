class BaseCommand:
    def get_interactor(self, InteractorKlass):
        return InteractorKlass()


class BaseInteractor:
    def execute(self, *args, **kwargs):
        raise NotImplementedError("override execute in subclass")
