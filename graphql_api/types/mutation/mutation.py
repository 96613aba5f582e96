from ariadne import MutationType

from .change_post import resolve_change_post
from .change_profile import resolve_change_profile
from .change_user import resolve_change_user
from .create_post import resolve_create_post
from .create_profile import resolve_create_profile
from .create_user import resolve_create_user
from .delete_post import resolve_delete_post
from .delete_profile import resolve_delete_profile
from .delete_user import resolve_delete_user
from .subscribe_to import resolve_subscribe_to
from .unsubscribe_from import resolve_unsubscribe_from

mutation_bindable = MutationType()

mutation_bindable.field("createPost")(resolve_create_post)
mutation_bindable.field("createUser")(resolve_create_user)
mutation_bindable.field("createProfile")(resolve_create_profile)
mutation_bindable.field("deletePost")(resolve_delete_post)
mutation_bindable.field("deleteProfile")(resolve_delete_profile)
mutation_bindable.field("deleteUser")(resolve_delete_user)
mutation_bindable.field("changePost")(resolve_change_post)
mutation_bindable.field("changeProfile")(resolve_change_profile)
mutation_bindable.field("changeUser")(resolve_change_user)
mutation_bindable.field("subscribeTo")(resolve_subscribe_to)
mutation_bindable.field("unsubscribeFrom")(resolve_unsubscribe_from)

mutation_resolvers = [mutation_bindable]
