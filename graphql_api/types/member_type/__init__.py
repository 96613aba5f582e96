from .member_type import member_type, member_type_bindable
